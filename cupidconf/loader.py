#!/usr/bin/python3
# -*- coding: utf-8 -*-
"""
Configuration Loading
=====================

Reading of configuration files into a sealed store. A load either produces a
fully populated store or no store at all.


Contents
========

Functions
---------

    read_lines - read the lines of a configuration file
    load_file  - load a configuration file raising on failure
    load       - load a configuration file returning None on failure

"""

__date__ = "2026-10-17"

import logging
import os
import typing

import cupidconf.exceptions as cpd_exc
import cupidconf.parsing as cpd_parse
from cupidconf.store import Store

logger = logging.getLogger("CupidConf.Loader")

FILE_ENCODING = "utf-8"
LINE_SEPARATOR = "\n"


def read_lines(file_name: str) -> typing.List[str]:
    """Read the lines of a configuration file

    Lines are split on newline characters only, any carriage returns are
    left in place to be removed when each line is trimmed.

    Parameters
    ----------
    file_name : str
        path of the file to read

    Returns
    -------
    List[str]
        lines of the file
    """
    if not os.path.exists(file_name):
        raise cpd_exc.ConfigLoadError(
            f"Cannot load configuration from file '{file_name}', "
            "file does not exist",
            file_name,
            hint="Check the path given, '~' is only expanded when a home "
            "directory is available",
        )

    if os.path.isdir(file_name):
        raise cpd_exc.ConfigLoadError(
            f"Cannot load configuration from '{file_name}', path is a directory",
            file_name,
        )

    try:
        with open(file_name, encoding=FILE_ENCODING, newline="") as in_f:
            _content = in_f.read()
    except UnicodeDecodeError as e:
        raise cpd_exc.ConfigLoadError(
            f"Cannot load configuration from file '{file_name}', "
            f"file is not valid {FILE_ENCODING} text",
            file_name,
        ) from e
    except OSError as e:
        raise cpd_exc.ConfigLoadError(
            f"Cannot load configuration from file '{file_name}': {e.strerror}",
            file_name,
        ) from e

    return _content.split(LINE_SEPARATOR)


def load_file(
    file_name: typing.Union[str, os.PathLike], home: typing.Optional[str] = None
) -> Store:
    """Load a configuration file into a sealed store

    Parameters
    ----------
    file_name : str | PathLike
        path of the configuration file, a leading '~' is expanded using home
    home : str, optional
        home directory used for expansion of the path and of values

    Returns
    -------
    Store
        store containing every entry of the file in file order
    """
    if file_name is None:
        raise cpd_exc.ConfigLoadError("No configuration file specified", "")

    _path = cpd_parse.expand_home(os.fspath(file_name), home)

    logger.debug("Loading file '%s'", _path)

    _store = Store.from_pairs(cpd_parse.parse_lines(read_lines(_path), home))

    logger.debug("Loaded %s entries from '%s'", len(_store), _path)

    return _store


def load(
    file_name: typing.Union[str, os.PathLike], home: typing.Optional[str] = None
) -> typing.Optional[Store]:
    """Load a configuration file into a sealed store

    Parameters
    ----------
    file_name : str | PathLike
        path of the configuration file, a leading '~' is expanded using home
    home : str, optional
        home directory used for expansion of the path and of values

    Returns
    -------
    Store | None
        populated store, or None if the file could not be loaded
    """
    try:
        return load_file(file_name, home)
    except cpd_exc.ConfigLoadError as e:
        logger.error(e.msg)
        return None
