import logging
import db.pool as pool

# ================== PLAYER SETUP ==================

async def get_setup(guild_id: int) -> dict | None:

    """
    Returns the stored player setup for a guild.

    Args:
        guild_id (int): The Discord guild ID.

    Returns:
        dict | None: {"text_id": int, "message_id": int}, or None when the guild has no setup.
    """

    if guild_id is None:
        return None

    async with pool.db_pool.acquire() as conn:
        row = await conn.fetchrow(
            "SELECT text_id, message_id FROM setups WHERE guild_id = $1",
            int(guild_id)
        )

    if not row:
        return None
    return {"text_id": row["text_id"], "message_id": row["message_id"]}


async def save_setup(guild_id: int, text_id: int, message_id: int):
    async with pool.db_pool.acquire() as conn:
        await conn.execute("""
            INSERT INTO setups (guild_id, text_id, message_id)
            VALUES ($1, $2, $3)
            ON CONFLICT (guild_id) DO UPDATE
                SET text_id = $2,
                    message_id = $3,
                    last_update = NOW()
        """, int(guild_id), int(text_id), int(message_id))

    logging.info(f"💾 Setup saved for guild {guild_id}")


async def delete_setup(guild_id: int) -> bool:
    async with pool.db_pool.acquire() as conn:
        result = await conn.execute("DELETE FROM setups WHERE guild_id = $1", int(guild_id))

    # asyncpg returns "DELETE <count>"
    removed = result != "DELETE 0"
    if removed:
        logging.info(f"🗑️ Setup removed for guild {guild_id}")
    return removed
