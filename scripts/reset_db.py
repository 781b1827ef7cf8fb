"""Reset database to empty state.

Clears all data from:
- orders
- products
- books

Also drops the cached list responses from Redis.

Usage:
    uv run python -m scripts.reset_db
"""

import asyncio

from sqlalchemy import text

from catalog_api.core.database import async_session_maker, engine
from catalog_api.core.redis import close_redis, get_redis
from catalog_api.services.cache_service import (
    ALL_ORDERS_CACHE_KEY,
    ALL_PRODUCTS_CACHE_KEY,
    RedisResponseCache,
)


async def reset_database():
    """Clear all data from the database."""
    print("=" * 60)
    print("Resetting database to empty state...")
    print("=" * 60)

    async with async_session_maker() as session:
        for table in ["orders", "products", "books"]:
            result = await session.execute(text(f"DELETE FROM {table}"))
            print(f"  Deleted {result.rowcount} rows from {table}")

        await session.commit()
        print("\nDatabase cleared successfully!")


async def reset_cache():
    """Drop cached list responses."""
    print("\nResetting response cache...")

    try:
        cache = RedisResponseCache(await get_redis())
        for key in (ALL_ORDERS_CACHE_KEY, ALL_PRODUCTS_CACHE_KEY):
            removed = await cache.invalidate(key)
            print(f"  {key}: {'removed' if removed else 'not cached'}")
    except Exception as e:
        print(f"  Warning: Could not clear Redis: {e}")
        print("  (This is OK if Redis is not running locally)")
    finally:
        await close_redis()


async def main():
    await reset_database()
    await reset_cache()

    print("\n" + "=" * 60)
    print("Reset complete!")
    print("=" * 60)
    print("\nTo re-seed the database, run:")
    print("  uv run python -m scripts.seed_data")
    print("=" * 60)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
