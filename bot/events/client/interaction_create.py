import discord
import logging
from structures import Event


class InteractionCreate(Event):

    """Runs slash commands through the command registry."""

    def __init__(self, context):
        super().__init__(context, name="interaction", file="interaction_create.py")

    async def run(self, interaction: discord.Interaction):
        if interaction.type != discord.InteractionType.application_command:
            return

        data = interaction.data or {}
        command = self.context.registry.lookup(data.get("name", ""))
        if command is None:
            return

        args = [str(option.get("value")) for option in data.get("options", []) if "value" in option]
        logging.info(f"⚡ /{command.name} by {interaction.user} in {interaction.guild_id}")
        await command.run(interaction, args)


def setup(context):
    return InteractionCreate(context)
