import pytest

import cupidconf
import cupidconf.store as cpd_store

from conftest import TEST_HOME


@pytest.mark.api
def test_round_trip(example_config: str):
    _store = cupidconf.load(example_config, home=TEST_HOME)
    assert cupidconf.get_list(_store, "path") == ["/usr/local/bin", "/usr/bin"]
    assert cupidconf.value_in_list(_store, "ignore", "readme.txt")
    assert cupidconf.value_in_list(_store, "ignore", "build_output")
    assert not cupidconf.value_in_list(_store, "ignore", "notes.md")
    assert cupidconf.get(_store, "config_dir") == "/home/alice/.config/app"
    cupidconf.free(_store)
    assert len(_store) == 0


@pytest.mark.api
def test_missing_store():
    assert cupidconf.get(None, "path") is None
    assert cupidconf.get_list(None, "*") == []
    assert not cupidconf.value_in_list(None, "ignore", "a.txt")
    cupidconf.free(None)


@pytest.mark.api
def test_exports():
    assert cupidconf.Store is cpd_store.Store
    assert cupidconf.Entry is cpd_store.Entry
    assert cupidconf.__version__
