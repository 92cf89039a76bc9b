import logging
from structures import Event


class Ready(Event):
    def __init__(self, context):
        super().__init__(context, name="ready", file="ready.py")

    async def run(self, *args):
        bot = self.context.bot
        logging.info(f"✅ Online as {bot.user} in {len(bot.guilds)} guilds")


def setup(context):
    return Ready(context)
