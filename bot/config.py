import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
PREFIX = os.getenv("PREFIX", "!")

# Slash commands are published globally in production, otherwise on GUILD_ID only
PRODUCTION = _env_bool("PRODUCTION", True)
GUILD_ID = int(os.getenv("GUILD_ID") or 0) or None

# Audio nodes: discovered from the public node list, or a JSON array in LAVALINK_NODES
AUTO_NODE = _env_bool("AUTO_NODE", False)
LAVALINK_NODES = os.getenv("LAVALINK_NODES", "[]")

DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en-US")

COMMANDS_DIR = Path(os.getenv("COMMANDS_DIR", BASE_DIR / "commands"))
EVENTS_DIR = Path(os.getenv("EVENTS_DIR", BASE_DIR / "events"))
LOCALES_DIR = Path(os.getenv("LOCALES_DIR", BASE_DIR / "locales"))

DB_HOST = os.getenv("DB_HOST")
DB_NAME = os.getenv("DB_NAME")
DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_PORT = int(os.getenv("DB_PORT", 5432))
