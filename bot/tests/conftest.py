# bot/tests/conftest.py
"""
Shared fixtures per i test del bot.
Nessuna connessione reale a DB, Discord o ai nodi audio — tutto viene mockato.
"""
import sys
import os
import json
import textwrap
import pytest
from unittest.mock import MagicMock

# Aggiunge bot/ al path Python così i moduli si trovano
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from utils.i18n import I18n
from discord_bot.bus import EventBus
from discord_bot.context import BotContext


LOCALES = {
    "en-US": {
        "cmd": {
            "play": {"description": "Plays a song", "options": {"song": "The song to play"}},
            "stop": {"description": "Stops the player"},
        },
        "greeting": "Hello {name}",
    },
    "it": {
        "cmd": {
            "play": {"description": "Riproduce una canzone"},
        },
        "play": "riproduci",
    },
    "fr": {},
}


@pytest.fixture
def locales_dir(tmp_path):
    path = tmp_path / "locales"
    path.mkdir()
    for lang, data in LOCALES.items():
        (path / f"{lang}.json").write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def i18n(locales_dir):
    return I18n(locales_dir=locales_dir, default_lang="en-US")


@pytest.fixture
def context(i18n):
    bot = MagicMock()
    bot.bus = EventBus("platform")
    return BotContext(bot=bot, db=MagicMock(), i18n=i18n)


@pytest.fixture
def write_handler(tmp_path):
    """Scrive un modulo handler in <tmp>/<root>/<category>/<filename>."""
    def _write(root, category, filename, source):
        folder = tmp_path / root / category
        folder.mkdir(parents=True, exist_ok=True)
        (folder / filename).write_text(textwrap.dedent(source), encoding="utf-8")
        return tmp_path / root
    return _write
