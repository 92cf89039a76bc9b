import logging
from structures import Event


class TrackEnd(Event):
    def __init__(self, context):
        super().__init__(context, name="trackEnd", file="track_end.py")

    async def run(self, player, track, *args):
        logging.debug(f"⏹️ Track ended on {getattr(player, 'guild_id', '?')}")


def setup(context):
    return TrackEnd(context)
