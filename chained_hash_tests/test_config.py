import importlib

import pytest

from chained_hash import config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for name in ("TESTING", "logzIO_api_key", "CHAINED_HASH_MIN_CAPACITY", "CHAINED_HASH_LOAD_FACTOR"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.setenv("TESTING", "true")
    for name in ("logzIO_api_key", "CHAINED_HASH_MIN_CAPACITY", "CHAINED_HASH_LOAD_FACTOR"):
        monkeypatch.delenv(name, raising=False)
    importlib.reload(config)


def test_testing_mode_uses_null_handler(reload_config):
    cfg = reload_config(TESTING="true", logzIO_api_key="secret")

    assert cfg.LOGGING is cfg.TEST_LOGGING
    assert cfg.LOGGING['loggers']['chained_hash']['handlers'] == ['null']


def test_api_key_selects_logzio(reload_config):
    cfg = reload_config(logzIO_api_key="secret")

    assert cfg.LOGGING is cfg.PRODUCTION_LOGGING
    assert cfg.LOGGING['handlers']['logzio']['token'] == "secret"


def test_console_fallback_without_api_key(reload_config):
    cfg = reload_config()

    assert cfg.LOGGING is cfg.CONSOLE_LOGGING


def test_table_defaults(reload_config):
    cfg = reload_config()
    assert (cfg.MIN_CAPACITY, cfg.LOAD_FACTOR) == (16, 10)

    cfg = reload_config(CHAINED_HASH_MIN_CAPACITY="64", CHAINED_HASH_LOAD_FACTOR="4")
    assert (cfg.MIN_CAPACITY, cfg.LOAD_FACTOR) == (64, 4)


def test_malformed_integer_names_the_variable(reload_config):
    with pytest.raises(ValueError, match="CHAINED_HASH_LOAD_FACTOR"):
        reload_config(CHAINED_HASH_LOAD_FACTOR="ten")

    with pytest.raises(ValueError, match="CHAINED_HASH_MIN_CAPACITY"):
        reload_config(CHAINED_HASH_MIN_CAPACITY="")
