import logging
from dataclasses import dataclass
from typing import Any

from beanie import PydanticObjectId
from beanie.odm.operators.update.general import Set
from beanie.odm.queries.update import UpdateResponse
from bson.errors import InvalidId

from app.models.enums import NotificationType
from app.models.notification import Notification
from app.utils.dates import utc_now

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class NotificationFilter:
    """
    Typed query over one user's notifications.
    """
    user_id: PydanticObjectId
    type: str | None = None
    read: bool | None = None

    def expressions(self) -> list:
        terms = [Notification.user_id == self.user_id]
        if self.type:
            terms.append(Notification.type == self.type)
        if self.read is not None:
            terms.append(Notification.read == self.read)
        return terms

@dataclass
class NotificationPage:
    notifications: list[Notification]
    unread_count: int
    has_more: bool

def parse_object_id(value: str) -> PydanticObjectId | None:
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        return None

async def count_unread(user_id: PydanticObjectId) -> int:
    return await Notification.find(*NotificationFilter(user_id, read=False).expressions()).count()

async def list_notifications(
    user_id: PydanticObjectId,
    *,
    type: str | None = None,
    offset: int = 0,
    limit: int = 20,
) -> NotificationPage:
    """
    Newest-first slice of a user's notifications, plus the user's overall
    unread count (not narrowed by ``type``).

    ``has_more`` is true whenever a full page came back, so an exactly
    full last page still reports more.
    """
    notifications = (
        await Notification.find(*NotificationFilter(user_id, type=type).expressions())
        .sort(-Notification.created_at, -Notification.id)
        .skip(offset)
        .limit(limit)
        .to_list()
    )
    unread_count = await count_unread(user_id)
    return NotificationPage(
        notifications=notifications,
        unread_count=unread_count,
        has_more=len(notifications) == limit,
    )

async def mark_read(user_id: PydanticObjectId, notification_id: str) -> Notification | None:
    """
    Atomically flags one notification as read. Returns None when the id is
    malformed, unknown, or owned by someone else.
    """
    object_id = parse_object_id(notification_id)
    if object_id is None:
        return None

    return await Notification.find_one(
        Notification.id == object_id,
        Notification.user_id == user_id,
    ).update(
        Set({Notification.read: True, Notification.updated_at: utc_now()}),
        response_type=UpdateResponse.NEW_DOCUMENT,
    )

async def mark_all_read(user_id: PydanticObjectId) -> int:
    result = await Notification.find(*NotificationFilter(user_id, read=False).expressions()).update(
        Set({Notification.read: True, Notification.updated_at: utc_now()})
    )
    modified = result.modified_count if result is not None else 0
    logger.info("Marked %d notifications read for user %s", modified, user_id)
    return modified

async def create_notification(
    user_id: PydanticObjectId,
    type: NotificationType,
    title: str,
    message: str,
    data: dict[str, Any] | None = None,
) -> Notification:
    """
    Entry point for features that notify a user (likes, badges, challenges).
    """
    notification = Notification(user_id=user_id, type=type, title=title, message=message, data=data)
    await notification.insert()
    logger.debug("Created %s notification %s for user %s", type, notification.id, user_id)
    return notification
