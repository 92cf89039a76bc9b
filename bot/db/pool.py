import asyncpg
import logging
from config import DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASSWORD

db_pool = None


async def init_db():

    """
    Initializes the PostgreSQL database connection pool and creates required tables.

    This function sets up a global asyncpg connection pool with a size between 1 and 10
    connections. It ensures that the 'setups' table, holding the per-guild player
    setup channel and message, exists before the bot starts.

    Returns:
        asyncpg.pool.Pool: The initialized database pool object.

    Raises:
        Exception: If there is a connection error or a failure during table creation.
    """

    global db_pool
    try:
        db_pool = await asyncpg.create_pool(
            host=DB_HOST,
            port=DB_PORT,
            user=DB_USER,
            password=DB_PASSWORD,
            database=DB_NAME,
            min_size=1,
            max_size=10,
        )

        async with db_pool.acquire() as conn:
            await conn.execute("""
                CREATE TABLE IF NOT EXISTS setups (
                    guild_id BIGINT PRIMARY KEY,
                    text_id BIGINT NOT NULL,
                    message_id BIGINT NOT NULL,
                    last_update TIMESTAMP DEFAULT NOW()
                );
            """)

        logging.info("📦 Database initialized and ready")
        return db_pool

    except Exception as e:
        logging.exception(f"❌ Error initializing DB: {e}")
        db_pool = None
        raise


async def close_db():
    global db_pool
    if db_pool is not None:
        await db_pool.close()
        db_pool = None
