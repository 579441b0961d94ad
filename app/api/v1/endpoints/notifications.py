import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api import deps
from app.api.deps import CurrentUser
from app.core.exceptions import NotFoundError, ServerError
from app.core.rate_limit import limiter
from app.schemas.notification import (
    NotificationDetail,
    NotificationList,
    NotificationListResponse,
    NotificationRead,
    Pagination,
)
from app.schemas.response import APIResponse, MessageResponse
from app.services import notifications as notification_service

logger = logging.getLogger(__name__)

router = APIRouter()

# Served with and without the trailing slash, no redirect
@router.get("", response_model=NotificationListResponse)
@router.get("/", response_model=NotificationListResponse, include_in_schema=False)
@limiter.limit("60/minute")
async def get_notifications(
    request: Request,
    current_user: CurrentUser,
    pagination: Annotated[deps.PageParams, Depends()],
    type: Annotated[str | None, Query(description="Only return notifications of this type")] = None,
):
    """
    Retrieve the current user's notifications, newest first, with their unread count.
    """
    try:
        result = await notification_service.list_notifications(
            current_user.id, type=type, offset=pagination.offset, limit=pagination.limit
        )
    except Exception as e:
        logger.exception("Get notifications error for user %s", current_user.id)
        raise ServerError("Server error fetching notifications") from e

    return NotificationListResponse(
        message="Notifications retrieved",
        data=NotificationList(
            notifications=[NotificationRead.model_validate(n) for n in result.notifications],
            unread_count=result.unread_count,
        ),
        pagination=Pagination(has_more=result.has_more),
    )

# Registered before "/{notification_id}/read" so "read-all" is never taken as an id
@router.put("/read-all", response_model=MessageResponse)
@limiter.limit("30/minute")
async def mark_all_as_read(request: Request, current_user: CurrentUser):
    """
    Mark every unread notification of the current user as read.
    """
    try:
        await notification_service.mark_all_read(current_user.id)
    except Exception as e:
        logger.exception("Mark all notifications read error for user %s", current_user.id)
        raise ServerError("Server error updating notifications") from e

    return MessageResponse(message="All notifications marked as read")

@router.put("/{notification_id}/read", response_model=APIResponse[NotificationDetail])
@limiter.limit("120/minute")
async def mark_as_read(request: Request, notification_id: str, current_user: CurrentUser):
    """
    Mark one of the current user's notifications as read.
    """
    try:
        notification = await notification_service.mark_read(current_user.id, notification_id)
    except Exception as e:
        logger.exception("Mark notification read error for %s", notification_id)
        raise ServerError("Server error updating notification") from e

    if notification is None:
        raise NotFoundError("Notification not found")

    return APIResponse(
        message="Notification marked as read",
        data=NotificationDetail(notification=NotificationRead.model_validate(notification)),
    )
