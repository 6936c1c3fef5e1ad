#
# Copyright (C) 2012 - 2017 Satoru SATOH <ssato@redhat.com>
# License: GPLv3+
#
"""Globals.
"""
import logging
import os

PACKAGE = "icacher"

ICACHER_CONF = os.environ.get("ICACHER_CONF", "/etc/%s.d/*.*" % PACKAGE)

LOGGING_FORMAT = "%(asctime)s %(name)s: [%(levelname)s] %(message)s"


def get_logger(name=PACKAGE, fmt=LOGGING_FORMAT, level=logging.WARN):
    """
    Initialize custom logger.

    Calling this more than once for the same logger only updates its level;
    handlers are not duplicated.

    >>> logger = get_logger("icacher.doctest", level=logging.DEBUG)
    >>> logger.level == logging.DEBUG
    True
    >>> len(get_logger("icacher.doctest").handlers)
    1
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        hdlr = logging.StreamHandler()
        hdlr.setFormatter(logging.Formatter(fmt))
        logger.addHandler(hdlr)

    for hdlr in logger.handlers:
        hdlr.setLevel(level)

    return logger

# vim:sw=4:ts=4:et:
