#!/usr/bin/python3
# -*- coding: utf-8 -*-
"""
CupidConf
=========

Reads files of 'key = value' lines into an ordered multi-map supporting
repeated keys and wildcard matching of both keys and values.


Contents
========

Functions
---------

    load          - load a configuration file, None on failure
    get           - first value whose key matches a pattern
    get_list      - all values whose keys match a pattern
    value_in_list - test a string against the value patterns under a key
    free          - release a loaded store

"""

__date__ = "2026-10-17"
__version__ = "0.1.0"

import typing

from cupidconf.loader import load
from cupidconf.store import Entry, Store

__all__ = [
    "Entry",
    "Store",
    "load",
    "get",
    "get_list",
    "value_in_list",
    "free",
    "__version__",
]


def get(store: typing.Optional[Store], key_pattern: str) -> typing.Optional[str]:
    """Returns the first value whose key matches the pattern, else None"""
    if store is None:
        return None
    return store.get(key_pattern)


def get_list(store: typing.Optional[Store], key_pattern: str) -> typing.List[str]:
    """Returns all values whose keys match the pattern in file order"""
    if store is None:
        return []
    return store.get_list(key_pattern)


def value_in_list(
    store: typing.Optional[Store], key: str, candidate: str
) -> bool:
    """Returns whether a value pattern stored under the exact key matches"""
    if store is None:
        return False
    return store.value_in_list(key, candidate)


def free(store: typing.Optional[Store]) -> None:
    if store is None:
        return
    store.free()
