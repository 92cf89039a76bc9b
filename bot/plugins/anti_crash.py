import asyncio
import logging


def handle_loop_exception(loop, ctx):
    exception = ctx.get("exception")
    message = ctx.get("message", "Unhandled exception in event loop")
    if exception is not None:
        logging.error(f"💥 {message}", exc_info=exception)
    else:
        logging.error(f"💥 {message}")


def initialize(context):
    asyncio.get_running_loop().set_exception_handler(handle_loop_exception)
