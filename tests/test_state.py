import pytest

from bjim.errors import ConfigError
from bjim.state import get_global, reset_global, set_global


@pytest.fixture(autouse=True)
def clean_state():
    reset_global()
    yield
    reset_global()


def test_get_before_set_raises():
    with pytest.raises(RuntimeError, match="Config is not initialized"):
        get_global()


def test_set_then_get_returns_same_object():
    config = {"data_dir": "."}
    set_global(config)
    assert get_global() is config


def test_second_set_raises_and_keeps_first():
    first = {"name": "first"}
    set_global(first)
    with pytest.raises(ConfigError, match="Failed to globalize config"):
        set_global({"name": "second"})
    assert get_global() is first


def test_reset_allows_new_config():
    set_global({"name": "first"})
    reset_global()
    second = {"name": "second"}
    set_global(second)
    assert get_global() is second