import discord
from dataclasses import dataclass, field



# Application command option types used by the platform
OPTION_STRING = 3
OPTION_INTEGER = 4
OPTION_BOOLEAN = 5



@dataclass
class Option:

    """
    A slash-command option.

    `description` holds a translation key until the manifest is assembled; the
    registry then replaces it with the base-locale text and fills both
    localization maps.
    """

    name: str
    description: str
    type: int = OPTION_STRING
    required: bool = False
    choices: list[dict] | None = None
    name_localizations: dict[str, str] = field(default_factory=dict)
    description_localizations: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = {
            "type": self.type,
            "name": self.name,
            "description": self.description,
            "required": self.required,
            "name_localizations": dict(self.name_localizations),
            "description_localizations": dict(self.description_localizations),
        }
        if self.choices:
            data["choices"] = list(self.choices)
        return data



@dataclass
class CommandPermissions:
    user: list[str] = field(default_factory=list)
    client: list[str] = field(default_factory=list)
    dev: bool = False



class Command:

    """
    Base type for every command module under `commands/<category>/`.

    Subclasses pass their metadata to `__init__` and implement `run`. A module
    exposes it through a `setup(context)` factory returning the instance.

    Args:
        context (BotContext): Shared bot context.
        name (str): Unique command name.
        description (str): Translation key of the command description.
        aliases (list[str]): Alternative names for prefix invocation.
        options (list[Option]): Slash-command options, in order.
        permissions (CommandPermissions): Required permissions.
        slash_command (bool): Whether the command is published in the manifest.
    """

    def __init__(
        self,
        context,
        *,
        name: str,
        description: str,
        aliases: list[str] | None = None,
        category: str = "general",
        usage: str = "",
        examples: list[str] | None = None,
        options: list[Option] | None = None,
        permissions: CommandPermissions | None = None,
        cooldown: int = 3,
        slash_command: bool = False,
    ):
        self.context = context
        self.name = name
        self.description = description
        self.aliases = list(aliases or [])
        self.category = category
        self.usage = usage
        self.examples = list(examples or [])
        self.options = list(options or [])
        self.permissions = permissions or CommandPermissions()
        self.cooldown = cooldown
        self.slash_command = slash_command


    async def run(self, source: discord.Message | discord.Interaction, args: list[str]):
        raise NotImplementedError(f"Command '{self.name}' does not implement run()")


    @staticmethod
    async def reply(source: discord.Message | discord.Interaction, content: str | None = None, **kwargs):
        if isinstance(source, discord.Interaction):
            if source.response.is_done():
                return await source.followup.send(content, **kwargs)
            return await source.response.send_message(content, **kwargs)
        return await source.channel.send(content, **kwargs)


    def __repr__(self):
        return f"<Command name={self.name!r} category={self.category!r}>"
