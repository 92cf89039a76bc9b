# bot/tests/test_sync.py
"""
Tests per bot/discord_bot/sync.py

Copre:
- publish()  — scope globale in produzione, scope guild altrimenti, stesso body in entrambi i casi
- publish()  — errore HTTP loggato e non propagato, guild id mancante, application id mancante
- on_ready() — pubblicazione una sola volta anche con più eventi ready
- idempotenza — ripubblicare lo stesso manifest lascia invariato il set remoto
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from discord_bot.bus import EventBus
from discord_bot.sync import SlashCommandSynchronizer


BODY = [{"name": "play", "description": "Plays a song", "type": 1, "options": []}]


def _make_bot(application_id=42):
    bot = MagicMock()
    bot.application_id = application_id
    bot.user = MagicMock(id=application_id)
    bot.bus = EventBus("platform")
    bot.http.bulk_upsert_global_commands = AsyncMock(return_value=[])
    bot.http.bulk_upsert_guild_commands = AsyncMock(return_value=[])
    return bot


class FakeRemote:
    """Simula il set di comandi remoto con semantica full-replace."""

    def __init__(self):
        self.commands = {"old": {"name": "old"}}

    async def put(self, *args):
        body = args[-1]
        self.commands = {c["name"]: c for c in body}
        return body


class TestPublish:

    @pytest.mark.asyncio
    async def test_production_targets_global_scope(self):
        bot = _make_bot()
        sync = SlashCommandSynchronizer(bot, production=True, guild_id=7)

        assert await sync.publish(BODY) is True

        bot.http.bulk_upsert_global_commands.assert_awaited_once_with(42, BODY)
        bot.http.bulk_upsert_guild_commands.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_development_targets_guild_scope(self):
        bot = _make_bot()
        sync = SlashCommandSynchronizer(bot, production=False, guild_id=7)

        assert await sync.publish(BODY) is True

        bot.http.bulk_upsert_guild_commands.assert_awaited_once_with(42, 7, BODY)
        bot.http.bulk_upsert_global_commands.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_flag_changes_only_scope_not_body(self):
        prod_bot, dev_bot = _make_bot(), _make_bot()
        await SlashCommandSynchronizer(prod_bot, production=True, guild_id=7).publish(BODY)
        await SlashCommandSynchronizer(dev_bot, production=False, guild_id=7).publish(BODY)

        prod_body = prod_bot.http.bulk_upsert_global_commands.call_args[0][-1]
        dev_body = dev_bot.http.bulk_upsert_guild_commands.call_args[0][-1]
        assert prod_body == dev_body

    @pytest.mark.asyncio
    async def test_http_error_is_logged_not_raised(self, caplog):
        bot = _make_bot()
        bot.http.bulk_upsert_global_commands = AsyncMock(side_effect=Exception("403 Forbidden"))
        sync = SlashCommandSynchronizer(bot, production=True)

        assert await sync.publish(BODY) is False
        assert "403 Forbidden" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_guild_id_in_development(self):
        bot = _make_bot()
        sync = SlashCommandSynchronizer(bot, production=False, guild_id=None)

        assert await sync.publish(BODY) is False
        bot.http.bulk_upsert_guild_commands.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_application_id(self):
        bot = _make_bot(application_id=None)
        bot.user = None
        sync = SlashCommandSynchronizer(bot, production=True)

        assert await sync.publish(BODY) is False

    @pytest.mark.asyncio
    async def test_republishing_same_body_is_noop_remotely(self):
        """Full-replace: il comando "old" sparisce, il secondo publish non cambia nulla."""
        remote = FakeRemote()
        bot = _make_bot()
        bot.http.bulk_upsert_global_commands = AsyncMock(side_effect=remote.put)
        sync = SlashCommandSynchronizer(bot, production=True)

        await sync.publish(BODY)
        after_first = dict(remote.commands)
        await sync.publish(BODY)

        assert "old" not in after_first
        assert remote.commands == after_first


class TestOnReady:

    @pytest.mark.asyncio
    async def test_publishes_once_on_first_ready(self):
        bot = _make_bot()
        registry = MagicMock()
        registry.manifest.return_value = BODY
        sync = SlashCommandSynchronizer(bot, production=True)
        sync.attach(registry)

        await bot.bus.emit("ready")
        await bot.bus.emit("ready")

        bot.http.bulk_upsert_global_commands.assert_awaited_once_with(42, BODY)
        assert sync.published is True

    @pytest.mark.asyncio
    async def test_failed_publish_is_not_retried_on_reconnect(self):
        bot = _make_bot()
        bot.http.bulk_upsert_global_commands = AsyncMock(side_effect=Exception("boom"))
        registry = MagicMock()
        registry.manifest.return_value = BODY
        sync = SlashCommandSynchronizer(bot, production=True)
        sync.attach(registry)

        await bot.bus.emit("ready")
        await bot.bus.emit("ready")

        assert bot.http.bulk_upsert_global_commands.await_count == 1

    @pytest.mark.asyncio
    async def test_without_registry_does_nothing(self):
        bot = _make_bot()
        sync = SlashCommandSynchronizer(bot, production=True)

        await sync.on_ready()

        bot.http.bulk_upsert_global_commands.assert_not_awaited()
