from beanie import Document
from pymongo import ASCENDING, IndexModel

from app.models.enums import BadgeCategory

class Badge(Document):
    badge_id: str
    name: str
    description: str
    icon: str
    category: BadgeCategory

    class Settings:
        name = "badges"
        indexes = [IndexModel([("badge_id", ASCENDING)], unique=True)]
