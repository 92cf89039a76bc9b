# bot/tests/test_config.py
"""
Tests per bot/config.py

Copre:
- GUILD_ID       — assente, vuoto, valorizzato
- PRODUCTION     — parsing dei booleani da variabile d'ambiente
"""

import importlib
import pytest
import config


@pytest.fixture
def reload_config(monkeypatch):
    """Ricarica config con l'ambiente patchato, poi lo ripristina."""
    def _reload(**env):
        for name, value in env.items():
            if value is None:
                monkeypatch.delenv(name, raising=False)
            else:
                monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestGuildId:

    @pytest.mark.parametrize("value", [None, "", "0"])
    def test_unset_or_empty_is_none(self, reload_config, value):
        assert reload_config(GUILD_ID=value).GUILD_ID is None

    def test_parses_integer(self, reload_config):
        assert reload_config(GUILD_ID="123456789").GUILD_ID == 123456789


class TestProduction:

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("false", False),
        ("0", False),
        ("TRUE", True),
        ("yes", True),
    ])
    def test_env_bool(self, reload_config, value, expected):
        assert reload_config(PRODUCTION=value).PRODUCTION is expected
