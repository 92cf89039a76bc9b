import discord
from structures import Command, Option


class Help(Command):
    def __init__(self, context):
        super().__init__(
            context,
            name="help",
            description="cmd.help.description",
            aliases=["h"],
            usage="help [command]",
            examples=["help", "help ping"],
            options=[
                Option(name="command", description="cmd.help.options.command", required=False),
            ],
            slash_command=True,
        )

    async def run(self, source, args):
        i18n = self.context.i18n
        registry = self.context.registry
        lang = i18n.default_lang
        prefix = self.context.prefix

        if args:
            command = registry.lookup(args[0].lower())
            if command is None:
                await self.reply(source, i18n.t(lang, "cmd.help.not_found", command=args[0]))
                return

            embed = discord.Embed(title=f"{prefix}{command.name}", description=i18n.t(lang, command.description))
            if command.aliases:
                embed.add_field(name=i18n.t(lang, "cmd.help.aliases"), value=", ".join(command.aliases), inline=False)
            if command.usage:
                embed.add_field(name=i18n.t(lang, "cmd.help.usage"), value=f"`{prefix}{command.usage}`", inline=False)
            await self.reply(source, embed=embed)
            return

        embed = discord.Embed(title=i18n.t(lang, "cmd.help.title"), color=discord.Color.blurple())
        for category, commands in sorted(registry.by_category().items()):
            embed.add_field(
                name=category.capitalize(),
                value=", ".join(f"`{c.name}`" for c in commands),
                inline=False
            )
        embed.set_footer(text=i18n.t(lang, "cmd.help.footer", prefix=prefix))
        await self.reply(source, embed=embed)


def setup(context):
    return Help(context)
