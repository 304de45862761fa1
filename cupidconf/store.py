#!/usr/bin/python3
# -*- coding: utf-8 -*-
"""
Configuration Store
===================

Ordered multi-map holding the key-value pairs read from a configuration file
along with the lookups performed against it.

Keys may repeat, every occurrence is kept in file order. Lookups by key
treat the caller's key as a glob pattern, whereas membership tests compare
keys exactly and treat the stored values as glob patterns.


Contents
========

Classes
-------

    Entry - a single immutable key-value pair
    Store - ordered collection of entries with query methods

"""

__date__ = "2026-10-17"

import logging
import typing

import pydantic

import cupidconf.exceptions as cpd_exc
import cupidconf.matching as cpd_match


class Entry(pydantic.BaseModel):
    key: pydantic.StrictStr = pydantic.Field(
        ...,
        title="key",
        description="key as it appeared left of the first '='",
    )
    value: pydantic.StrictStr = pydantic.Field(
        ...,
        title="value",
        description="value with comments removed and home directory expanded",
    )

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")


class Store:
    """Ordered key-value store populated once then queried

    Entries are appended in file order and the store is sealed when loading
    completes, after which the only permitted change is freeing the whole
    store. Querying never modifies the store and never raises for a missing
    key.
    """

    _logger = logging.getLogger("CupidConf.Store")

    def __init__(self) -> None:
        self._entries: typing.List[Entry] = []
        self._sealed = False
        self._freed = False

    @classmethod
    def from_pairs(
        cls, pairs: typing.Iterable[typing.Tuple[str, str]]
    ) -> "Store":
        """Create a sealed store from an iterable of key-value pairs

        Parameters
        ----------
        pairs : Iterable[Tuple[str, str]]
            key-value pairs in the order they should be stored

        Returns
        -------
        Store
            new sealed store
        """
        _store = cls()
        for key, value in pairs:
            _store.append(key, value)
        _store.seal()
        return _store

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def freed(self) -> bool:
        return self._freed

    def append(self, key: str, value: str) -> Entry:
        """Add an entry to the end of the store

        Parameters
        ----------
        key : str
            entry key
        value : str
            entry value

        Returns
        -------
        Entry
            the newly stored entry
        """
        if self._sealed:
            raise cpd_exc.StoreSealedError(
                f"Cannot add key '{key}', the store is "
                f"{'freed' if self._freed else 'sealed'}"
            )
        _entry = Entry(key=key, value=value)
        self._entries.append(_entry)
        return _entry

    def seal(self) -> None:
        """Prevent any further entries being added"""
        self._sealed = True
        self._logger.debug("Store sealed with %s entries", len(self._entries))

    def get(self, key_pattern: typing.Optional[str]) -> typing.Optional[str]:
        """Retrieve the value of the first entry with a key matching a pattern

        Parameters
        ----------
        key_pattern : str
            glob pattern tested against each stored key

        Returns
        -------
        str | None
            value of the earliest matching entry, None if there is none
        """
        if key_pattern is None:
            return None

        for entry in self._entries:
            if cpd_match.match_wildcard(key_pattern, entry.key):
                return entry.value

        return None

    def get_list(self, key_pattern: typing.Optional[str]) -> typing.List[str]:
        """Retrieve the values of all entries with a key matching a pattern

        Parameters
        ----------
        key_pattern : str
            glob pattern tested against each stored key

        Returns
        -------
        List[str]
            values of all matching entries in file order, empty if none match
        """
        if key_pattern is None:
            return []

        return [
            entry.value
            for entry in self._entries
            if cpd_match.match_wildcard(key_pattern, entry.key)
        ]

    def value_in_list(
        self, key: typing.Optional[str], candidate: typing.Optional[str]
    ) -> bool:
        """Check a string against the value patterns stored under a key

        The key is compared exactly, it is never treated as a pattern. Each
        value stored under the key is used as a glob pattern for the
        candidate.

        Parameters
        ----------
        key : str
            exact key to search for
        candidate : str
            string to test against the stored patterns

        Returns
        -------
        bool
            True on the first stored pattern matching the candidate
        """
        if key is None or candidate is None:
            return False

        if cpd_match.has_wildcard(key):
            self._logger.debug(
                "Key '%s' contains wildcard characters, keys are compared exactly"
                " for membership tests",
                key,
            )

        for entry in self._entries:
            if entry.key != key:
                continue
            if cpd_match.match_wildcard(entry.value, candidate):
                return True

        return False

    def keys(self) -> typing.List[str]:
        """Returns all keys in file order, repeats included"""
        return [entry.key for entry in self._entries]

    def free(self) -> None:
        """Release all entries held by the store

        The store is left empty and sealed. Freeing a store a second time is
        the caller's error and is not guarded against beyond the store
        already being empty.
        """
        self._logger.debug("Freeing store of %s entries", len(self._entries))
        self._entries = []
        self._sealed = True
        self._freed = True

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, type, value, tb) -> None:
        self.free()

    def __iter__(self) -> typing.Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        _state = "freed" if self._freed else "sealed" if self._sealed else "open"
        return f"<Store entries={len(self._entries)} {_state}>"
