from setuptools import setup, find_packages

import codecs
import os.path
import os

PACKAGE = "icacher"
VERSION = "0.2.0"

# For daily snapshot versioning mode:
if os.environ.get("_SNAPSHOT_BUILD", None) is not None:
    import datetime
    VERSION = VERSION + datetime.datetime.now().strftime(".%Y%m%d")


def read_readme(path="README.rst"):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), path)
    if not os.path.exists(path):
        return ""

    return codecs.open(path, 'r', 'utf-8').read()


setup(name=PACKAGE,
      version=VERSION,
      description="Cache results of single-argument functions",
      long_description=read_readme(),
      author="Satoru SATOH",
      author_email="ssato@redhat.com",
      license="GPLv3+",
      url="https://github.com/ssato/icacher",
      packages=find_packages(),
      include_package_data=True,
      install_requires=["anyconfig"],
      extras_require=dict(test=["pytest"]),
      classifiers=["Programming Language :: Python :: 3",
                   "License :: OSI Approved :: "
                   "GNU General Public License v3 or later (GPLv3+)"])

# vim:sw=4:ts=4:et:
