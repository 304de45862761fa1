#!/usr/bin/python3
# -*- coding: utf-8 -*-
"""
CupidConf Exceptions
====================

Custom exceptions for the configuration loader and store. Queries never raise
on a miss, these are reserved for failures to read a configuration file and
for misuse of a store's population interface.


Contents
========

Exceptions
----------

    CupidConfException
    ConfigLoadError
    StoreSealedError

"""

__date__ = "2026-10-17"

import click


class CupidConfException(Exception):
    """Base exception class for all CupidConf exceptions"""

    def __init__(
        self,
        msg: str,
        hint: str = "",
        level: str = "Error",
        exit_code: int = 1,
    ):
        """Initialises a CupidConf exception type.

        A level can be specified which is a prefix whenever the exception is
        captured and printed (when used within the CLI itself)

        Parameters
        ----------
        msg : str
            message to display
        hint : str
            possible solution to issue raised
        level : str, optional
            level descriptor (message prefix), by default "Error"
        exit_code : int, optional
            exit code used by the CLI, by default 1
        """
        self.msg = msg
        self.level = level
        self.hint = hint
        self.exit_code = exit_code
        super().__init__(msg)

    def err_print(self) -> None:
        _out_msg = f"{self.level+': ' if self.level else ''}{self.msg}"
        if self.hint:
            _out_msg += f"\n{self.hint}"
        click.echo(_out_msg, err=True)


class ConfigLoadError(CupidConfException):
    """Errors relating to reading a configuration file"""

    def __init__(self, msg: str, path: str, hint: str = ""):
        self.path = path
        super().__init__(msg, hint=hint)


class StoreSealedError(CupidConfException):
    """Attempt to add entries to a store which is sealed or freed"""

    def __init__(self, msg: str):
        super().__init__(msg, level="InternalError")
