# bot/tests/test_main.py
"""
Tests per bot/main.py

Copre:
- run() — token mancante, DB non raggiungibile, handler non validi, discovery dei nodi fallita,
          login rifiutato, errore generico → exit code 1; avvio completo → 0
- close_db() sempre chiamato quando il DB è stato aperto
"""

import discord
import pytest
from unittest.mock import AsyncMock, MagicMock, patch
import main
from discord_bot.loader import HandlerLoadError
from discord_bot.registry import DuplicateCommandError, InvalidPermissionError
from services.nodes import NodeDiscoveryError


def _make_bot(launch_error=None):
    """Helper: MusicBot mockato, `async with bot` supportato da MagicMock."""
    bot = MagicMock()
    bot.__aenter__ = AsyncMock(return_value=bot)
    bot.__aexit__ = AsyncMock(return_value=False)
    bot.launch = AsyncMock(side_effect=launch_error)
    return bot


async def _run(bot=None, token="token", init_error=None):
    bot = bot or _make_bot()
    with (
        patch.object(main, "DISCORD_TOKEN", token),
        patch.object(main, "MusicBot", return_value=bot) as factory,
        patch.object(main.db, "init_db", new=AsyncMock(side_effect=init_error)) as init_db,
        patch.object(main.db, "close_db", new=AsyncMock()) as close_db,
    ):
        code = await main.run()
    return code, factory, init_db, close_db


class TestRun:

    @pytest.mark.asyncio
    async def test_successful_run_returns_zero(self):
        bot = _make_bot()

        code, factory, init_db, close_db = await _run(bot)

        assert code == 0
        init_db.assert_awaited_once()
        factory.assert_called_once_with(db=main.db)
        bot.launch.assert_awaited_once_with("token")
        close_db.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_token(self, caplog):
        code, factory, init_db, close_db = await _run(token=None)

        assert code == 1
        init_db.assert_not_awaited()
        factory.assert_not_called()
        assert "DISCORD_TOKEN" in caplog.text

    @pytest.mark.asyncio
    async def test_database_failure(self, caplog):
        code, factory, _, close_db = await _run(init_error=OSError("connection refused"))

        assert code == 1
        factory.assert_not_called()
        close_db.assert_awaited_once()
        assert "Database unavailable" in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error,message", [
        (HandlerLoadError("broken.py"), "Invalid handler set"),
        (DuplicateCommandError("play"), "Invalid handler set"),
        (InvalidPermissionError("nope"), "Invalid handler set"),
        (NodeDiscoveryError("503"), "Audio node discovery failed"),
        (discord.LoginFailure("bad token"), "Login failed"),
        (RuntimeError("boom"), "Startup aborted"),
    ])
    async def test_fatal_startup_errors(self, caplog, error, message):
        code, _, _, close_db = await _run(_make_bot(launch_error=error))

        assert code == 1
        close_db.assert_awaited_once()
        assert message in caplog.text
