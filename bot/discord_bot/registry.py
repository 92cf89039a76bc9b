import discord
import logging
from dataclasses import dataclass, field
from discord_bot.loader import HandlerLoader


# Chat input (slash) application command type
CHAT_INPUT = 1



class RegistryError(Exception):
    """Load-time integrity error in the command set."""


class DuplicateCommandError(RegistryError):
    pass


class AliasCollisionError(RegistryError):
    pass


class InvalidPermissionError(RegistryError):
    pass



@dataclass
class CommandManifestEntry:
    name: str
    description: str
    options: list[dict] = field(default_factory=list)
    default_member_permissions: str | None = None
    name_localizations: dict[str, str] = field(default_factory=dict)
    description_localizations: dict[str, str] = field(default_factory=dict)
    type: int = CHAT_INPUT

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "type": self.type,
            "options": list(self.options),
            "default_member_permissions": self.default_member_permissions,
            "name_localizations": dict(self.name_localizations),
            "description_localizations": dict(self.description_localizations),
        }



def resolve_permissions(flags) -> str | None:

    """
    Projects a list of permission flag names onto the platform bitmask.

    Args:
        flags (list[str]): Permission names as used by discord.Permissions (e.g. "manage_guild").

    Returns:
        str | None: The bitmask as a decimal string, or None when there is no restriction.

    Raises:
        InvalidPermissionError: If a flag name is unknown.
    """

    if not isinstance(flags, (list, tuple, set, frozenset)) or not flags:
        return None
    try:
        permissions = discord.Permissions(**{flag: True for flag in flags})
    except TypeError as e:
        raise InvalidPermissionError(f"Unknown permission in {sorted(flags)}: {e}") from e
    return str(permissions.value)



class CommandRegistry:

    """
    Command-name index, alias index and the slash-command manifest body.

    `commands` and `aliases` are lookup maps; `manifest_body` keeps load order
    and is exactly what gets published.
    """

    def __init__(self, i18n):
        self.i18n = i18n
        self.commands = {}
        self.aliases = {}
        self.manifest_body: list[CommandManifestEntry] = []


    def load(self, root_dir, context) -> int:
        loader = HandlerLoader(context, namespace="commands")
        for category, command, _path in loader.load(root_dir):
            command.category = category
            self.add(command)
        logging.info(f"✅ Loaded {len(self.commands)} commands ({len(self.manifest_body)} slash)")
        return len(self.commands)


    def _validate(self, command):
        name = command.name
        if name in self.commands:
            raise DuplicateCommandError(f"Duplicate command name '{name}'")
        if name in self.aliases:
            raise DuplicateCommandError(f"Command name '{name}' is already an alias of '{self.aliases[name]}'")

        seen = set()
        for alias in command.aliases:
            if alias in seen:
                raise AliasCollisionError(f"Alias '{alias}' repeated in command '{name}'")
            seen.add(alias)
            if alias in self.commands:
                raise AliasCollisionError(f"Alias '{alias}' of '{name}' collides with a command name")
            if alias in self.aliases:
                raise AliasCollisionError(f"Alias '{alias}' of '{name}' already points to '{self.aliases[alias]}'")


    def add(self, command):

        """
        Registers a command, its aliases and, for slash commands, its manifest entry.

        Validation runs before anything is stored, so a rejected command leaves
        the registry untouched.

        Raises:
            DuplicateCommandError: The name is already registered.
            AliasCollisionError: An alias collides with a name or another alias.
            InvalidPermissionError: A user permission flag is unknown.
        """

        self._validate(command)
        entry = self.build_manifest_entry(command) if command.slash_command else None

        self.commands[command.name] = command
        for alias in command.aliases:
            self.aliases[alias] = command.name
        if entry is not None:
            self.manifest_body.append(entry)


    def lookup(self, name_or_alias: str):
        name = self.aliases.get(name_or_alias, name_or_alias)
        return self.commands.get(name)


    def build_manifest_entry(self, command) -> CommandManifestEntry:
        base = self.i18n.default_lang
        entry = CommandManifestEntry(
            name=command.name,
            description=self.i18n.t(base, command.description),
            default_member_permissions=resolve_permissions(command.permissions.user),
        )

        for locale in self.i18n.locales():
            localized = self.i18n.localize(locale, command.name, command.description)
            language, name = localized.name
            language2, description = localized.description
            entry.name_localizations[language] = name
            entry.description_localizations[language2] = description

        for option in command.options:
            for locale in self.i18n.locales():
                localized = self.i18n.localize(locale, option.name, option.description)
                language, name = localized.name
                language2, description = localized.description
                option.name_localizations[language] = name
                option.description_localizations[language2] = description
            # the key is consumed here
            option.description = self.i18n.t(base, option.description)

        entry.options = [option.to_dict() for option in command.options]
        return entry


    def manifest(self) -> list[dict]:
        return [entry.to_dict() for entry in self.manifest_body]


    def by_category(self) -> dict[str, list]:
        categories = {}
        for command in self.commands.values():
            categories.setdefault(command.category, []).append(command)
        return categories
