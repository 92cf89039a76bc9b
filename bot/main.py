import sys
import asyncio
import logging
import discord
import db
from logger import setup_logger
from config import DISCORD_TOKEN
from discord_bot.bot import MusicBot
from discord_bot.loader import HandlerLoadError
from discord_bot.registry import RegistryError
from services.nodes import NodeDiscoveryError



"""
Main entry point for the music bot.

This script orchestrates the startup process by:
1. Initializing the global logger with UTF-8 support and file logging.
2. Opening the database pool that stores each guild's player setup.
3. Running the bot lifecycle (locales, audio nodes, commands, events, plugins, login).

A broken deployment (bad handler module, duplicate command, unreachable node list,
rejected token) stops the process with a non-zero exit code.

Returns:
    int: Process exit code.
"""
async def run() -> int:
    if not DISCORD_TOKEN:
        logging.critical("❌ DISCORD_TOKEN is not set")
        return 1

    try:
        await db.init_db()
    except Exception as e:
        logging.critical(f"❌ Database unavailable: {e}")
        await db.close_db()
        return 1

    bot = MusicBot(db=db)
    try:
        async with bot:
            await bot.launch(DISCORD_TOKEN)
    except (HandlerLoadError, RegistryError) as e:
        logging.critical(f"❌ Invalid handler set: {e}")
        return 1
    except NodeDiscoveryError as e:
        logging.critical(f"❌ Audio node discovery failed: {e}")
        return 1
    except discord.LoginFailure as e:
        logging.critical(f"❌ Login failed: {e}")
        return 1
    except Exception as e:
        logging.exception(f"❌ Startup aborted: {e}")
        return 1
    finally:
        await db.close_db()
    return 0


if __name__ == "__main__":
    setup_logger()
    sys.exit(asyncio.run(run()))
