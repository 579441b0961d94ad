from datetime import datetime
from typing import Any
from beanie import Document, PydanticObjectId
from pydantic import Field
from pymongo import ASCENDING, DESCENDING, IndexModel

from app.models.enums import NotificationType
from app.utils.dates import utc_now

# Notifications are dropped by MongoDB 30 days after creation
NOTIFICATION_TTL_SECONDS = 30 * 24 * 60 * 60

class Notification(Document):
    """
    Model for user notifications.
    """
    user_id: PydanticObjectId = Field(description="ID of the user receiving the notification")
    type: NotificationType = Field(description="Category of the notification")
    title: str = Field(max_length=100, description="Notification title")
    message: str = Field(max_length=300, description="Content of the notification")
    data: dict[str, Any] | None = Field(default=None, description="Free-form payload (post id, badge id, ...)")
    read: bool = Field(default=False, description="Whether the notification has been read")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "notifications"
        indexes = [
            IndexModel([("user_id", ASCENDING), ("created_at", DESCENDING)]),
            IndexModel([("user_id", ASCENDING), ("read", ASCENDING)]),
            IndexModel([("type", ASCENDING)]),
            IndexModel([("created_at", ASCENDING)], expireAfterSeconds=NOTIFICATION_TTL_SECONDS),
        ]
