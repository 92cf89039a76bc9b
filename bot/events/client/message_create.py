import discord
import logging
from structures import Event


class MessageCreate(Event):

    """Runs prefix commands; aliases are resolved by the registry."""

    def __init__(self, context):
        super().__init__(context, name="message", file="message_create.py")

    async def run(self, message: discord.Message):
        if message.author.bot or not message.guild:
            return

        prefix = self.context.prefix
        if not message.content.startswith(prefix):
            return

        parts = message.content[len(prefix):].strip().split()
        if not parts:
            return

        command = self.context.registry.lookup(parts[0].lower())
        if command is None:
            return

        logging.info(f"⚡ {prefix}{command.name} by {message.author} in {message.guild.id}")
        await command.run(message, parts[1:])


def setup(context):
    return MessageCreate(context)
