import logging



class SlashCommandSynchronizer:

    """
    Publishes the slash-command manifest once, on the first `ready`.

    The publish is a single full-replace PUT: globally in production, otherwise
    on the configured guild. Whatever the platform had registered before is
    replaced by the body, so republishing the same body changes nothing.

    Args:
        bot (MusicBot): Platform client; provides `bus`, `http` and `application_id`.
        production (bool): Publish globally when True.
        guild_id (int | None): Target guild when not in production.
    """

    def __init__(self, bot, production: bool, guild_id: int | None = None):
        self.bot = bot
        self.production = production
        self.guild_id = guild_id
        self.published = False
        self._registry = None


    def attach(self, registry):
        self._registry = registry
        self.bot.bus.subscribe("ready", self.on_ready)


    async def on_ready(self, *args):
        if self.published or self._registry is None:
            return
        self.published = True
        await self.publish(self._registry.manifest())


    @property
    def scope(self) -> str:
        return "global" if self.production else f"guild {self.guild_id}"


    async def publish(self, body: list[dict]) -> bool:
        application_id = self.bot.application_id or getattr(self.bot.user, "id", None)

        try:
            if application_id is None:
                raise RuntimeError("application id not available")

            if self.production:
                await self.bot.http.bulk_upsert_global_commands(application_id, body)
            else:
                if not self.guild_id:
                    raise RuntimeError("GUILD_ID is required when PRODUCTION is disabled")
                await self.bot.http.bulk_upsert_guild_commands(application_id, self.guild_id, body)

            logging.info(f"✅ Published {len(body)} slash commands ({self.scope})")
            return True
        except Exception as e:
            logging.error(f"❌ Error publishing slash commands ({self.scope}): {e}")
            return False
