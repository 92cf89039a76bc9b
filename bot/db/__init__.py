from .pool import init_db, close_db, db_pool
from .setup import (
    delete_setup,
    save_setup,
    get_setup,
)

__all__ = [
    "delete_setup",
    "save_setup",
    "get_setup",
    "close_db",
    "init_db",
    "db_pool",
]
