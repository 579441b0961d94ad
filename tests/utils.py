import uuid
from datetime import timedelta

from app.core.security import create_access_token
from app.models.enums import NotificationType
from app.models.notification import Notification
from app.models.user import User
from app.utils.dates import utc_now

async def create_user(username: str = None, is_active: bool = True) -> User:
    if not username:
        username = f"user_{uuid.uuid4().hex[:8]}"
    user = User(
        username=username,
        email=f"{username}@example.com",
        hashed_password="not-a-real-hash",
        is_active=is_active,
    )
    await user.insert()
    return user

def get_auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}

async def create_user_and_get_headers():
    user = await create_user()
    return user, get_auth_headers(user)

async def add_notifications(
    user: User,
    count: int,
    type: NotificationType = NotificationType.LIKE,
    read: bool = False,
    newest_at=None,
) -> list[Notification]:
    """
    Inserts ``count`` notifications one minute apart, oldest first.
    """
    newest_at = newest_at or utc_now()
    notifications = []
    for i in range(count):
        created = newest_at - timedelta(minutes=count - 1 - i)
        notification = Notification(
            user_id=user.id,
            type=type,
            title=f"{type} {i}",
            message=f"Message {i}",
            read=read,
            created_at=created,
            updated_at=created,
        )
        await notification.insert()
        notifications.append(notification)
    return notifications
