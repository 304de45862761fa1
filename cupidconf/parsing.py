#!/usr/bin/python3
# -*- coding: utf-8 -*-
"""
Line Parsing
============

Normalisation of configuration file lines into key-value pairs.

Lines are trimmed, blank lines and those starting with a comment character
are skipped, as are lines without a '=' separator. The value is cut at the
first comment character and a leading '~' is replaced by the home directory.


Contents
========

Constants
---------

    COMMENT_CHARS - characters starting a comment, whole line or inline
    SEPARATOR     - key-value separator
    HOME_CHAR     - home directory shorthand

Functions
---------

    strip_inline_comment - remove a trailing comment from a value
    expand_home          - substitute '~' or '~/' at the start of a string
    parse_line           - convert a single line into a key-value pair
    parse_lines          - convert lines into key-value pairs in order

"""

__date__ = "2026-10-17"

import logging
import typing

COMMENT_CHARS: typing.Tuple[str, ...] = ("#", ";")
SEPARATOR = "="
HOME_CHAR = "~"

logger = logging.getLogger("CupidConf.Parsing")


def strip_inline_comment(value: str) -> str:
    """Truncate a value at the first comment character

    Parameters
    ----------
    value : str
        value as read from the right of the separator

    Returns
    -------
    str
        trimmed value with any comment removed
    """
    for i, char in enumerate(value):
        if char in COMMENT_CHARS:
            return value[:i].strip()
    return value


def expand_home(value: str, home: typing.Optional[str]) -> str:
    """Replace a leading '~' with the home directory

    Only '~' on its own or followed by '/' is expanded, '~user' forms are
    left as they are. If no home directory is given the value is returned
    unchanged.

    Parameters
    ----------
    value : str
        string to expand
    home : str, optional
        home directory path

    Returns
    -------
    str
        expanded string
    """
    if home is None or not value.startswith(HOME_CHAR):
        return value

    _remainder = value[len(HOME_CHAR):]

    if _remainder and not _remainder.startswith("/"):
        return value

    return f"{home}{_remainder}"


def parse_line(
    line: str, home: typing.Optional[str] = None
) -> typing.Optional[typing.Tuple[str, str]]:
    """Convert a configuration line into a key-value pair

    Parameters
    ----------
    line : str
        line from a configuration file
    home : str, optional
        home directory used to expand values starting with '~'

    Returns
    -------
    Tuple[str, str] | None
        key and value, or None if the line does not define an entry
    """
    _line = line.strip()

    if not _line or _line[0] in COMMENT_CHARS:
        return None

    if SEPARATOR not in _line:
        return None

    _key, _value = _line.split(SEPARATOR, 1)
    _value = strip_inline_comment(_value.strip())

    return _key.strip(), expand_home(_value, home)


def parse_lines(
    lines: typing.Iterable[str], home: typing.Optional[str] = None
) -> typing.Iterator[typing.Tuple[str, str]]:
    """Convert configuration lines into key-value pairs preserving order

    Parameters
    ----------
    lines : Iterable[str]
        lines from a configuration file
    home : str, optional
        home directory used to expand values starting with '~'

    Yields
    ------
    Tuple[str, str]
        key and value for each line defining an entry
    """
    for line_no, line in enumerate(lines, start=1):
        _pair = parse_line(line, home)

        if _pair is None:
            _stripped = line.strip()
            # Only report lines which are not plainly blank or comments
            if _stripped and _stripped[0] not in COMMENT_CHARS:
                logger.debug(
                    "Skipping line %s, no '%s' separator: %s",
                    line_no,
                    SEPARATOR,
                    _stripped,
                )
            continue

        yield _pair
