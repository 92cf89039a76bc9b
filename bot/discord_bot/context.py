import logging
from dataclasses import dataclass, field



@dataclass
class BotContext:

    """
    Everything a handler factory or a plugin may need, passed explicitly.

    Fields are filled in as the bot moves through its startup phases: `i18n`
    after localization, `audio` after the audio client is built, `registry`
    and `router` when commands and events are loaded.
    """

    bot: object
    db: object
    prefix: str = "!"
    i18n: object = None
    audio: object = None
    registry: object = None
    router: object = None
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("musicbot"))
