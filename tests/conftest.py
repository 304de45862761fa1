import logging
import os
import typing

import pytest

import cupidconf.store as cpd_store

TEST_HOME = "/home/alice"

EXAMPLE_CONFIG = """# comment
path = /usr/local/bin
path = /usr/bin
ignore = *.txt
ignore = build_*
config_dir = ~/.config/app
"""

TEST_MARKERS = {
    "matching": "wildcard matching primitive",
    "parsing": "line normalisation",
    "store": "store population and queries",
    "loader": "loading of configuration files",
    "api": "package level functions",
    "cli": "command line interface",
}


logging.getLogger("CupidConf").setLevel(logging.DEBUG)


def pytest_configure(config):
    for marker, description in TEST_MARKERS.items():
        config.addinivalue_line("markers", f"{marker}: {description}")


@pytest.fixture
def write_config(tmp_path) -> typing.Callable[[str, str], str]:
    """Write the given content to a file in a temporary directory"""
    def _write(content: str, file_name: str = "test.conf") -> str:
        _cfg_path = os.path.join(tmp_path, file_name)
        with open(_cfg_path, "w", encoding="utf-8", newline="") as out_f:
            out_f.write(content)
        return _cfg_path
    return _write


@pytest.fixture
def example_config(write_config: typing.Callable[[str, str], str]) -> str:
    return write_config(EXAMPLE_CONFIG, "example.conf")


@pytest.fixture
def example_store() -> cpd_store.Store:
    return cpd_store.Store.from_pairs(
        [
            ("path", "/usr/local/bin"),
            ("path", "/usr/bin"),
            ("ignore", "*.txt"),
            ("ignore", "build_*"),
            ("ignore2", "*.md"),
            ("config_dir", "/home/alice/.config/app"),
            ("", "empty key"),
        ]
    )
