import logging
from datetime import timedelta

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models import DOCUMENT_MODELS, Challenge
from app.models.enums import ChallengeDifficulty
from app.utils.dates import utc_now

logger = logging.getLogger(__name__)

CHALLENGE_DURATION = timedelta(days=7)

async def init_db(database: AsyncIOMotorDatabase) -> None:
    """
    Registers every document model with beanie, which also creates the
    collections' declared indexes.
    """
    await init_beanie(database=database, document_models=DOCUMENT_MODELS)

    # Collections without indexes are not created by beanie
    existing = set(await database.list_collection_names())
    for model in DOCUMENT_MODELS:
        name = model.get_motor_collection().name
        if name not in existing:
            await database.create_collection(name)
            logger.info("Created collection %s", name)

    logger.info("Initialized collections on database %s", database.name)

def default_challenges() -> list[Challenge]:
    start = utc_now()
    return [
        Challenge(
            title="Plant a Tree",
            description="Plant a tree in your community",
            points=100,
            difficulty=ChallengeDifficulty.MEDIUM,
            category="environment",
            start_date=start,
            end_date=start + CHALLENGE_DURATION,
        ),
        Challenge(
            title="Zero Waste Day",
            description="Go a full day without creating any waste",
            points=75,
            difficulty=ChallengeDifficulty.HARD,
            category="sustainability",
            start_date=start,
            end_date=start + CHALLENGE_DURATION,
        ),
    ]

async def seed_challenges() -> int:
    """
    Inserts the starter challenges into an empty collection.
    Returns how many were inserted (0 when challenges already exist).
    """
    if await Challenge.find_all().count():
        logger.info("Challenges already present, skipping seed")
        return 0

    challenges = default_challenges()
    await Challenge.insert_many(challenges)
    logger.info("Seeded %d challenges", len(challenges))
    return len(challenges)
