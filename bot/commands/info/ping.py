import discord
from structures import Command


class Ping(Command):
    def __init__(self, context):
        super().__init__(
            context,
            name="ping",
            description="cmd.ping.description",
            aliases=["pong"],
            usage="ping",
            examples=["ping"],
            cooldown=3,
            slash_command=True,
        )

    async def run(self, source, args):
        latency = round(self.context.bot.latency * 1000)
        lang = self.context.i18n.default_lang
        embed = discord.Embed(
            description=self.context.i18n.t(lang, "cmd.ping.content", latency=latency),
            color=discord.Color.blurple()
        )
        await self.reply(source, embed=embed)


def setup(context):
    return Ping(context)
