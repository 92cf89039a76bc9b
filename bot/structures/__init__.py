from .event import Event
from .command import (
    OPTION_BOOLEAN,
    OPTION_INTEGER,
    OPTION_STRING,
    CommandPermissions,
    Command,
    Option,
)

__all__ = [
    "CommandPermissions",
    "OPTION_BOOLEAN",
    "OPTION_INTEGER",
    "OPTION_STRING",
    "Command",
    "Option",
    "Event",
]
