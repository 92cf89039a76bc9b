import logging
from structures import Event


class TrackStart(Event):
    def __init__(self, context):
        super().__init__(context, name="trackStart", file="track_start.py")

    async def run(self, player, track, *args):
        logging.info(f"🎵 Track started on {getattr(player, 'guild_id', '?')}: {getattr(track, 'title', track)}")


def setup(context):
    return TrackStart(context)
