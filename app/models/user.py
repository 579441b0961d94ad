from datetime import datetime
from beanie import Document
from pydantic import EmailStr, Field
from pymongo import ASCENDING, IndexModel

from app.utils.dates import utc_now

class User(Document):
    """
    Greenstagram account.
    """
    username: str = Field(description="Unique public handle")
    email: EmailStr = Field(description="User's email address")
    hashed_password: str = Field(description="Hashed version of the user's password")
    bio: str | None = Field(default=None, max_length=500)
    profile_picture: str | None = Field(default=None, description="URL to user's avatar image")
    interests: list[str] = Field(default_factory=list)
    eco_points: int = 0
    eco_level: int = 1
    current_streak: int = 0
    longest_streak: int = 0
    is_active: bool = Field(default=True, description="Whether the user account is active")
    is_verified: bool = False
    is_private: bool = False
    created_at: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "users"
        indexes = [
            IndexModel([("username", ASCENDING)], unique=True),
            IndexModel([("email", ASCENDING)], unique=True),
        ]
