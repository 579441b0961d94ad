import asyncio
import logging

from app.db.init_db import init_db, seed_challenges
from app.db.session import close_client, get_database

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

async def main():
    database = get_database()
    await init_db(database)
    inserted = await seed_challenges()
    logger.info("MongoDB initialized successfully (%d challenges seeded)", inserted)
    close_client()

if __name__ == "__main__":
    asyncio.run(main())
