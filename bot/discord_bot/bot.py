import enum
import asyncio
import discord
import aiohttp
import logging
from config import (
    AUTO_NODE,
    COMMANDS_DIR,
    DEFAULT_LANGUAGE,
    EVENTS_DIR,
    GUILD_ID,
    LAVALINK_NODES,
    LOCALES_DIR,
    PREFIX,
    PRODUCTION,
)
from utils.i18n import init_i18n
from plugins import load_plugins
from discord_bot.bus import EventBus
from discord_bot.context import BotContext
from discord_bot.router import EventRouter
from discord_bot.registry import CommandRegistry
from discord_bot.sync import SlashCommandSynchronizer
from services.audio import AudioClient
from services.nodes import fetch_nodes, parse_nodes


# Event re-emitted for button presses on a guild's player setup message
SETUP_BUTTONS_EVENT = "setupButtons"



class LifecycleState(enum.IntEnum):
    UNINITIALIZED = 0
    LOCALIZATION_READY = 1
    AUDIO_CLIENT_READY = 2
    COMMANDS_LOADED = 3
    EVENTS_LOADED = 4
    PLUGINS_LOADED = 5
    LOGGED_IN = 6
    LIVE = 7



class LifecycleError(RuntimeError):
    pass



def default_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.message_content = True
    intents.guilds = True
    intents.voice_states = True
    return intents



class MusicBot(discord.Client):

    """
    Discord client that owns the bot's startup sequence.

    `launch()` walks the lifecycle strictly in order:
    localization -> audio client -> commands -> events -> plugins -> login -> live.
    Every gateway event is also forwarded to `bus`, the platform event bus the
    EventRouter subscribes to.

    Collaborators (database, node discovery, audio client, plugin loader) are
    injected so each phase can be exercised without a network.
    """

    def __init__(
        self,
        *,
        db,
        prefix: str = PREFIX,
        production: bool = PRODUCTION,
        guild_id: int | None = GUILD_ID,
        auto_node: bool = AUTO_NODE,
        nodes=LAVALINK_NODES,
        locales_dir=LOCALES_DIR,
        default_lang: str = DEFAULT_LANGUAGE,
        commands_dir=COMMANDS_DIR,
        events_dir=EVENTS_DIR,
        node_fetcher=fetch_nodes,
        audio_client_factory=AudioClient,
        plugin_loader=load_plugins,
        intents: discord.Intents | None = None,
        **options,
    ):
        super().__init__(intents=intents or default_intents(), **options)
        self.state = LifecycleState.UNINITIALIZED
        self.bus = EventBus("platform")
        self.context = BotContext(bot=self, db=db, prefix=prefix)

        self.auto_node = auto_node
        self.static_nodes = nodes
        self.locales_dir = locales_dir
        self.default_lang = default_lang
        self.commands_dir = commands_dir
        self.events_dir = events_dir
        self.node_fetcher = node_fetcher
        self.audio_client_factory = audio_client_factory
        self.plugin_loader = plugin_loader
        self.synchronizer = SlashCommandSynchronizer(self, production=production, guild_id=guild_id)
        self._bus_tasks = set()


    # ---------- platform event bus ----------

    def dispatch(self, event_name: str, /, *args, **kwargs):
        super().dispatch(event_name, *args, **kwargs)
        if self.bus.has_listeners(event_name):
            task = asyncio.create_task(self.bus.emit(event_name, *args), name=f"bus:{event_name}")
            self._bus_tasks.add(task)
            task.add_done_callback(self._bus_tasks.discard)


    async def close(self):
        current = asyncio.current_task()
        tasks = [task for task in self._bus_tasks if task is not current]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._bus_tasks.clear()
        await super().close()


    # ---------- lifecycle ----------

    def _expect(self, expected: LifecycleState, new: LifecycleState):
        if self.state != expected:
            raise LifecycleError(f"Cannot enter {new.name} from {self.state.name} (expected {expected.name})")


    def _enter(self, new: LifecycleState):
        self.state = new
        logging.debug(f"🔁 Lifecycle: {new.name}")


    def init_localization(self):
        self._expect(LifecycleState.UNINITIALIZED, LifecycleState.LOCALIZATION_READY)
        i18n = init_i18n(self.locales_dir, self.default_lang)
        self.context.i18n = i18n
        self._enter(LifecycleState.LOCALIZATION_READY)


    async def resolve_nodes(self):
        if self.auto_node:
            async with aiohttp.ClientSession() as session:
                return await self.node_fetcher(session)
        return parse_nodes(self.static_nodes)


    async def init_audio_client(self):
        self._expect(LifecycleState.LOCALIZATION_READY, LifecycleState.AUDIO_CLIENT_READY)
        nodes = await self.resolve_nodes()
        self.context.audio = self.audio_client_factory(self.context, nodes)
        self._enter(LifecycleState.AUDIO_CLIENT_READY)


    def load_commands(self):
        self._expect(LifecycleState.AUDIO_CLIENT_READY, LifecycleState.COMMANDS_LOADED)
        registry = CommandRegistry(self.context.i18n)
        self.context.registry = registry
        registry.load(self.commands_dir, self.context)
        self.synchronizer.attach(registry)
        logging.info("✅ Successfully loaded commands!")
        self._enter(LifecycleState.COMMANDS_LOADED)


    def load_events(self):
        self._expect(LifecycleState.COMMANDS_LOADED, LifecycleState.EVENTS_LOADED)
        router = EventRouter(self.bus, self.context.audio.bus)
        self.context.router = router
        router.load(self.events_dir, self.context)
        logging.info("✅ Successfully loaded events!")
        self._enter(LifecycleState.EVENTS_LOADED)


    def init_plugins(self):
        self._expect(LifecycleState.EVENTS_LOADED, LifecycleState.PLUGINS_LOADED)
        self.plugin_loader(self.context)
        self._enter(LifecycleState.PLUGINS_LOADED)


    async def login_to_platform(self, token: str):
        self._expect(LifecycleState.PLUGINS_LOADED, LifecycleState.LOGGED_IN)
        await self.login(token)
        self._enter(LifecycleState.LOGGED_IN)


    def go_live(self):
        self._expect(LifecycleState.LOGGED_IN, LifecycleState.LIVE)
        self.bus.subscribe("interaction", self.route_setup_buttons)
        self._enter(LifecycleState.LIVE)


    async def launch(self, token: str, *, reconnect: bool = True):

        """
        Runs the full startup sequence, then the gateway connection.

        Load-time integrity errors, node discovery failures and login failures
        propagate to the caller; a slash-command publish failure does not.

        Args:
            token (str): Bot token.
            reconnect (bool): Passed to discord.Client.connect.
        """

        self.init_localization()
        await self.init_audio_client()
        self.load_commands()
        self.load_events()
        self.init_plugins()
        await self.login_to_platform(token)
        self.go_live()
        await self.connect(reconnect=reconnect)


    # ---------- setup buttons ----------

    @staticmethod
    def is_button(interaction: discord.Interaction) -> bool:
        if interaction.type != discord.InteractionType.component:
            return False
        data = interaction.data or {}
        return data.get("component_type") == discord.ComponentType.button.value


    async def route_setup_buttons(self, interaction: discord.Interaction):
        if not self.is_button(interaction) or interaction.guild_id is None:
            return

        setup = await self.context.db.get_setup(interaction.guild_id)
        if not setup or interaction.message is None:
            return

        if interaction.channel_id == setup["text_id"] and interaction.message.id == setup["message_id"]:
            self.dispatch(SETUP_BUTTONS_EVENT, interaction)
