from datetime import datetime
from beanie import Document
from pydantic import Field
from pymongo import ASCENDING, DESCENDING, IndexModel

from app.models.enums import ChallengeDifficulty, ChallengeStatus

class Challenge(Document):
    """
    A time-boxed eco-challenge users can take part in.
    """
    title: str = Field(max_length=100)
    description: str
    points: int = Field(ge=0)
    difficulty: ChallengeDifficulty
    category: str
    status: ChallengeStatus = ChallengeStatus.ACTIVE
    start_date: datetime
    end_date: datetime

    class Settings:
        name = "challenges"
        indexes = [
            IndexModel([("start_date", ASCENDING), ("end_date", ASCENDING)]),
            IndexModel([("status", ASCENDING), ("start_date", DESCENDING)]),
        ]
