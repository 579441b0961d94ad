from datetime import datetime
from typing import Any, List
from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.models.enums import NotificationType
from app.schemas.response import APIResponse

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class NotificationRead(CamelModel):
    """
    Schema for reading a notification.
    """
    id: PydanticObjectId
    user_id: PydanticObjectId
    type: NotificationType
    title: str
    message: str
    data: dict[str, Any] | None = None
    read: bool
    created_at: datetime
    updated_at: datetime

class NotificationList(CamelModel):
    notifications: List[NotificationRead]
    unread_count: int

class NotificationDetail(CamelModel):
    notification: NotificationRead

class Pagination(CamelModel):
    has_more: bool

class NotificationListResponse(APIResponse[NotificationList]):
    pagination: Pagination
