import discord


def build_activity(context) -> discord.Activity:
    return discord.Activity(type=discord.ActivityType.listening, name=f"{context.prefix}help")


def initialize(context):
    bot = context.bot

    async def on_ready(*args):
        await bot.change_presence(activity=build_activity(context))

    bot.bus.subscribe("ready", on_ready)
