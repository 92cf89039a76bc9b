import sys
import logging



"""
Configures the global logging system for the bot.

This function performs two main tasks:
1. **UTF-8 Enforcement**: Reconfigures standard output and error streams to use UTF-8
   encoding, so emoji in log lines do not break on consoles with another default.
2. **Multi-Handler Logging**: Sets up a centralized logging format that records
   timestamps, log levels, and messages. Logs are simultaneously sent to the
   console (stdout) and persisted in the given log file.

Args:
    level (int): Root logging level.
    log_file (str): File receiving a copy of every record.

Returns:
    None
"""
def setup_logger(level=logging.INFO, log_file="bot.log"):
    # Force UTF-8 output (Windows fix)
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )

    # discord.py is chatty at INFO
    logging.getLogger("discord").setLevel(logging.WARNING)
