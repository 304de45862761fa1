#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command Line Interface
======================

Command line interface for querying configuration files from the shell.

Values starting with '~' are expanded using the home directory given by the
'--home' option, which defaults to the HOME environment variable.
"""

__date__ = "2026-10-17"

import logging
import sys

import click
import rich
import rich.markup

import cupidconf.exceptions as cpd_exc
import cupidconf.loader as cpd_load
import cupidconf.matching as cpd_match
import cupidconf.templates as cpd_tpl

__status__ = "Development"


def _enable_debug(debug: bool) -> None:
    if debug:
        logging.getLogger("CupidConf").setLevel(logging.DEBUG)


home_option = click.option(
    "--home",
    envvar="HOME",
    default=None,
    help="Home directory used to expand '~', defaults to $HOME",
)
debug_option = click.option(
    "--debug/--no-debug", help="Run in debug mode", default=False
)


@click.group()
@click.version_option(package_name="cupidconf")
def cli():
    """Query 'key = value' configuration files with wildcard matching."""
    pass


@cli.command()
@click.argument("file_name")
@click.argument("pattern")
@home_option
@debug_option
def get(file_name: str, pattern: str, home: str, debug: bool) -> None:
    """Print the first value whose key matches PATTERN"""
    try:
        _enable_debug(debug)
        _store = cpd_load.load_file(file_name, home)
    except cpd_exc.CupidConfException as e:
        e.err_print()
        if e.level.lower() == "error":
            sys.exit(e.exit_code)
        return

    with _store:
        _value = _store.get(pattern)

    if _value is None:
        sys.exit(1)

    click.echo(_value)


@cli.command("list")
@click.argument("file_name")
@click.argument("pattern")
@home_option
@debug_option
def list_values(file_name: str, pattern: str, home: str, debug: bool) -> None:
    """Print every value whose key matches PATTERN in file order"""
    try:
        _enable_debug(debug)
        _store = cpd_load.load_file(file_name, home)
    except cpd_exc.CupidConfException as e:
        e.err_print()
        if e.level.lower() == "error":
            sys.exit(e.exit_code)
        return

    with _store:
        _values = _store.get_list(pattern)

    if not _values:
        sys.exit(1)

    for value in _values:
        click.echo(value)


@cli.command()
@click.argument("file_name")
@click.argument("key")
@click.argument("candidate")
@click.option("--quiet/--no-quiet", help="Only set the exit code", default=False)
@home_option
@debug_option
def match(
    file_name: str, key: str, candidate: str, quiet: bool, home: str, debug: bool
) -> None:
    """Check CANDIDATE against the patterns stored under KEY

    KEY is compared exactly, the values stored under it are treated as
    wildcard patterns. Exits with status 0 on a match and 1 otherwise.
    """
    try:
        _enable_debug(debug)
        _store = cpd_load.load_file(file_name, home)
    except cpd_exc.CupidConfException as e:
        e.err_print()
        if e.level.lower() == "error":
            sys.exit(e.exit_code)
        return

    with _store:
        _matched = _store.value_in_list(key, candidate)

    if not quiet:
        click.echo("yes" if _matched else "no")

    sys.exit(0 if _matched else 1)


@cli.command()
@click.argument("file_name")
@click.option("--key", help="Only show entries with a key matching this pattern")
@home_option
@debug_option
def show(file_name: str, key: str, home: str, debug: bool) -> None:
    """Display the entries loaded from a configuration file"""
    try:
        _enable_debug(debug)
        _store = cpd_load.load_file(file_name, home)
    except cpd_exc.CupidConfException as e:
        e.err_print()
        if e.level.lower() == "error":
            sys.exit(e.exit_code)
        return

    with _store:
        _rows = [
            (i, rich.markup.escape(entry.key), rich.markup.escape(entry.value))
            for i, entry in enumerate(_store, start=1)
            if key is None or cpd_match.match_wildcard(key, entry.key)
        ]

    rich.print(
        cpd_tpl.show_template.render(
            file_name=rich.markup.escape(file_name),
            pattern=rich.markup.escape(key) if key else None,
            rows=_rows,
        )
    )


if __name__ == "__main__":
    cli()
