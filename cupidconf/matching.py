#!/usr/bin/python3
# -*- coding: utf-8 -*-
"""
Wildcard Matching
=================

Shell-style wildcard matching shared by the store queries. The same primitive
is used in both directions: a caller supplied pattern tested against stored
keys, and stored values used as patterns against a caller supplied string.


Contents
========

Constants
---------

    WILDCARD_CHARS - characters with a special meaning within a pattern

Functions
---------

    match_wildcard - test a candidate string against a glob pattern
    has_wildcard   - check whether a string contains glob characters

"""

__date__ = "2026-10-17"

import fnmatch
import typing

WILDCARD_CHARS: typing.Tuple[str, ...] = ("*", "?", "[")


def match_wildcard(pattern: typing.Optional[str], candidate: typing.Optional[str]) -> bool:
    """Check whether a candidate string matches a glob pattern

    Supports ``*`` (any run of characters, including none), ``?`` (exactly
    one character) and the bracket classes ``[seq]`` and ``[!seq]``.
    Matching is case sensitive and ``*`` also matches ``/``. A pattern
    containing no wildcard characters only matches an identical string.

    Parameters
    ----------
    pattern : str
        glob pattern
    candidate : str
        string to test against the pattern

    Returns
    -------
    bool
        whether the candidate matches, False if either argument is None
    """
    if pattern is None or candidate is None:
        return False

    return fnmatch.fnmatchcase(candidate, pattern)


def has_wildcard(text: typing.Optional[str]) -> bool:
    """Returns whether a string contains any glob special characters"""
    if not text:
        return False
    return any(c in text for c in WILDCARD_CHARS)
