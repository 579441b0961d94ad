from datetime import datetime
from beanie import Document, PydanticObjectId
from pydantic import Field
from pymongo import ASCENDING, DESCENDING, IndexModel

from app.models.enums import PostVisibility
from app.utils.dates import utc_now

class Post(Document):
    user_id: PydanticObjectId
    content: str = Field(max_length=2000)
    hashtags: list[str] = Field(default_factory=list)
    is_eco_post: bool = False
    eco_category: str | None = None
    visibility: PostVisibility = PostVisibility.PUBLIC
    likes: list[PydanticObjectId] = Field(default_factory=list)
    shares: int = 0
    created_at: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "posts"
        indexes = [
            IndexModel([("created_at", DESCENDING)]),
            IndexModel([("user_id", ASCENDING)]),
            IndexModel([("user_id", ASCENDING), ("created_at", DESCENDING)]),
            IndexModel([("hashtags", ASCENDING)]),
        ]
