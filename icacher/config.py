#
# -*- coding: utf-8 -*-
# Copyright (C) 2013 - 2016 Satoru SATOH <ssato@redhat.com>
# License: GPLv3+
#
"""icacher configuration.

Configuration files are loaded with anyconfig so that any format it supports
(JSON, INI, YAML if PyYAML is available, ...) can be used. Options:

- capacity: Capacity hint of cachers created without an explicit one
- loglevel: Logging level name of the package logger, e.g. "DEBUG"
"""
import glob
import logging
import os.path

import anyconfig

import icacher.cacher
import icacher.globals


LOG = logging.getLogger(__name__)

DEFAULTS = dict(capacity=0,
                loglevel="WARNING",
                conf_path=icacher.globals.ICACHER_CONF)


def _normpath(path):
    """
    Normalize given path.

    >>> _normpath("/tmp/../a//b/c")
    '/a/b/c'
    """
    if not path:
        raise ValueError("(Maybe) Empty path was given!")

    if path.startswith('~'):
        path = os.path.expanduser(path)

    return os.path.normpath(os.path.abspath(path))


def try_to_load_config_from_files(conf_path=None):
    """
    Load configurations from given `conf_path`.

    :param conf_path: Config file path or glob pattern of config files
    :return: A dict of DEFAULTS updated with loaded configurations

    >>> cnf = try_to_load_config_from_files("/not/exist/*.json")
    >>> cnf == DEFAULTS
    True
    """
    cnf = DEFAULTS.copy()

    if conf_path:
        paths = sorted(glob.glob(_normpath(conf_path)))
        if not paths:
            LOG.debug("No config files found: %s", conf_path)
            return cnf

        try:
            diff = anyconfig.load(paths)
            if diff:
                anyconfig.merge(cnf, diff)
        except (IOError, OSError) as exc:
            LOG.warning("Could not load config files: %s, %s", conf_path,
                        exc)

    return cnf


def _check_loglevel(loglevel):
    """
    >>> _check_loglevel("debug") == logging.DEBUG
    True
    >>> _check_loglevel("noisy")
    Traceback (most recent call last):
    ValueError: Invalid logging level: 'noisy'
    """
    level = logging.getLevelName(str(loglevel).upper())
    if not isinstance(level, int):
        raise ValueError("Invalid logging level: %r" % loglevel)

    return level


def load(conf_path=None, **kwargs):
    """
    Load configurations.

    :param conf_path: Config file path or glob pattern of config files
    :param kwargs: Options to override loaded ones
    :return: A dict of configurations

    >>> cnf = load("/not/exist/*.json", capacity="8")
    >>> cnf["capacity"], cnf["loglevel"]
    (8, 'WARNING')
    """
    if conf_path is None:
        conf_path = DEFAULTS["conf_path"]

    cnf = try_to_load_config_from_files(conf_path)
    cnf.update(kwargs)  # Override with kwargs may come from the caller.
    cnf["conf_path"] = conf_path

    cnf["capacity"] = icacher.cacher.check_capacity(cnf["capacity"])
    _check_loglevel(cnf["loglevel"])

    return cnf


def setup(conf_path=None, **kwargs):
    """
    Load configurations and apply them to the package.

    :param conf_path: Config file path or glob pattern of config files
    :param kwargs: Options to override loaded ones
    :return: A dict of configurations applied
    """
    cnf = load(conf_path, **kwargs)

    icacher.cacher.DEFAULT_CAPACITY = cnf["capacity"]
    icacher.globals.get_logger(level=_check_loglevel(cnf["loglevel"]))
    LOG.debug("Configured: %r", cnf)

    return cnf

# vim:sw=4:ts=4:et:
