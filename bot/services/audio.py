import logging
from discord_bot.bus import EventBus



class AudioClient:

    """
    Audio-node client as seen by the bot core.

    It owns the configured node descriptors and the audio-node event bus
    (trackStart, trackEnd, ...). The node transport feeds events in through
    `emit`; playback itself lives outside this repository.
    """

    def __init__(self, context, nodes):
        self.context = context
        self.nodes = list(nodes)
        self.bus = EventBus("audio")

        if not self.nodes:
            logging.warning("⚠️ Audio client created without nodes")
        else:
            logging.info(f"🎧 Audio client ready with nodes: {', '.join(n.name for n in self.nodes)}")


    def subscribe(self, event: str, listener):
        self.bus.subscribe(event, listener)


    async def emit(self, event: str, *args):
        await self.bus.emit(event, *args)
