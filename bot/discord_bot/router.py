import enum
import logging
from collections import defaultdict
from discord_bot.loader import HandlerLoader


# Event category routed to the audio-node client
PLAYER_CATEGORY = "player"



class EventScope(enum.Enum):
    PLATFORM = "platform"
    AUDIO_NODE = "audio-node"

    @classmethod
    def from_category(cls, category: str) -> "EventScope":
        return cls.AUDIO_NODE if category == PLAYER_CATEGORY else cls.PLATFORM



class EventRouter:

    """
    Routes named events from the platform and audio-node buses to event handlers.

    Handlers are kept in an explicit (scope, name) -> [handler, ...] map. One
    bus listener is installed per key; it runs every handler for that key in
    registration order with the arguments the event carried.

    Args:
        platform_bus (EventBus): Bus fed by the platform client.
        audio_bus (EventBus): Bus fed by the audio-node client.
    """

    def __init__(self, platform_bus, audio_bus):
        self.buses = {
            EventScope.PLATFORM: platform_bus,
            EventScope.AUDIO_NODE: audio_bus,
        }
        self.handlers = defaultdict(list)


    def load(self, root_dir, context) -> int:
        loader = HandlerLoader(context, namespace="events")
        count = 0
        for category, event, path in loader.load(root_dir):
            if not event.file:
                event.file = path.name
            self.subscribe(event, EventScope.from_category(category))
            count += 1
        logging.info(f"✅ Loaded {count} event handlers")
        return count


    def subscribe(self, handler, scope: EventScope = EventScope.PLATFORM):
        key = (scope, handler.name)
        if not self.handlers[key]:
            self.buses[scope].subscribe(handler.name, self._dispatcher(scope, handler.name))
        self.handlers[key].append(handler)
        handler.scope = scope


    def _dispatcher(self, scope: EventScope, name: str):
        async def dispatch(*args):
            await self.dispatch(scope, name, *args)
        return dispatch


    async def dispatch(self, scope: EventScope, name: str, *args):
        for handler in list(self.handlers.get((scope, name), ())):
            try:
                await handler.run(*args)
            except Exception:
                logging.exception(f"💥 Event handler {handler.file or handler.name} failed on '{name}'")


    def handlers_for(self, scope: EventScope, name: str) -> list:
        return list(self.handlers.get((scope, name), ()))
