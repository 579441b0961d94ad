import pytest
from httpx import AsyncClient
from pymongo.errors import PyMongoError

from app.api import deps
from app.core.config import settings
from app.models.enums import NotificationType
from app.models.notification import Notification
from app.services import notifications as notification_service
from app.utils.dates import utc_now
from tests.utils import add_notifications, create_user_and_get_headers

URL = f"{settings.API_PREFIX}/notifications"

@pytest.mark.asyncio
async def test_list_only_returns_own_notifications(client: AsyncClient, database):
    """
    A user never sees another user's notifications.
    """
    alice, alice_headers = await create_user_and_get_headers()
    bob, _ = await create_user_and_get_headers()
    await add_notifications(alice, 3)
    await add_notifications(bob, 5)

    response = await client.get(URL, headers=alice_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    notifications = body["data"]["notifications"]
    assert len(notifications) == 3
    assert {n["userId"] for n in notifications} == {str(alice.id)}
    assert body["data"]["unreadCount"] == 3

@pytest.mark.asyncio
async def test_list_is_newest_first_with_camel_case_keys(client: AsyncClient, database):
    user, headers = await create_user_and_get_headers()
    created = await add_notifications(user, 4)

    response = await client.get(URL, headers=headers)

    assert response.status_code == 200
    notifications = response.json()["data"]["notifications"]
    assert [n["id"] for n in notifications] == [str(n.id) for n in reversed(created)]
    first = notifications[0]
    assert set(first) >= {"id", "userId", "type", "title", "message", "read", "createdAt", "updatedAt"}
    assert first["read"] is False

@pytest.mark.asyncio
async def test_equal_timestamps_fall_back_to_insertion_order(client: AsyncClient, database):
    user, headers = await create_user_and_get_headers()
    moment = utc_now()
    first = Notification(user_id=user.id, type=NotificationType.LIKE, title="a", message="a", created_at=moment)
    second = Notification(user_id=user.id, type=NotificationType.LIKE, title="b", message="b", created_at=moment)
    await first.insert()
    await second.insert()

    response = await client.get(URL, headers=headers)

    ids = [n["id"] for n in response.json()["data"]["notifications"]]
    assert ids == [str(second.id), str(first.id)]

@pytest.mark.asyncio
async def test_full_page_reports_has_more_even_when_nothing_follows(client: AsyncClient, database):
    """
    hasMore only checks whether a full page came back.
    """
    user, headers = await create_user_and_get_headers()
    await add_notifications(user, 20)

    response = await client.get(URL, headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert len(body["data"]["notifications"]) == 20
    assert body["pagination"]["hasMore"] is True

    response = await client.get(f"{URL}?page=2", headers=headers)
    body = response.json()
    assert body["data"]["notifications"] == []
    assert body["pagination"]["hasMore"] is False

@pytest.mark.asyncio
async def test_pagination_offsets(client: AsyncClient, database):
    user, headers = await create_user_and_get_headers()
    created = await add_notifications(user, 12)
    newest_first = [str(n.id) for n in reversed(created)]

    response = await client.get(f"{URL}?page=2&limit=5", headers=headers)
    body = response.json()
    assert [n["id"] for n in body["data"]["notifications"]] == newest_first[5:10]
    assert body["pagination"]["hasMore"] is True

    response = await client.get(f"{URL}?page=3&limit=5", headers=headers)
    body = response.json()
    assert [n["id"] for n in body["data"]["notifications"]] == newest_first[10:]
    assert body["pagination"]["hasMore"] is False

@pytest.mark.asyncio
async def test_type_filter_does_not_narrow_unread_count(client: AsyncClient, database):
    user, headers = await create_user_and_get_headers()
    await add_notifications(user, 3, type=NotificationType.LIKE)
    await add_notifications(user, 1, type=NotificationType.LIKE, read=True)
    await add_notifications(user, 2, type=NotificationType.COMMENT)

    response = await client.get(f"{URL}?type=like", headers=headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["notifications"]) == 4
    assert {n["type"] for n in data["notifications"]} == {"like"}
    assert data["unreadCount"] == 5

@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["page=abc", "page=0", "page=-1", "limit=0", "limit=abc&page=0"])
async def test_unusable_paging_values_fall_back_to_defaults(client: AsyncClient, database, query):
    user, headers = await create_user_and_get_headers()
    created = await add_notifications(user, 25)
    newest_first = [str(n.id) for n in reversed(created)]

    response = await client.get(f"{URL}?{query}", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert [n["id"] for n in body["data"]["notifications"]] == newest_first[:20]
    assert body["pagination"]["hasMore"] is True

@pytest.mark.asyncio
async def test_leading_digits_are_used_and_limit_is_not_capped(client: AsyncClient, database):
    user, headers = await create_user_and_get_headers()
    await add_notifications(user, 25)

    response = await client.get(f"{URL}?limit=150", headers=headers)
    body = response.json()
    assert response.status_code == 200
    assert len(body["data"]["notifications"]) == 25
    assert body["pagination"]["hasMore"] is False

    response = await client.get(f"{URL}?page=2abc&limit=10xyz", headers=headers)
    body = response.json()
    assert len(body["data"]["notifications"]) == 10
    assert body["pagination"]["hasMore"] is True

@pytest.mark.asyncio
async def test_list_with_trailing_slash_is_served_directly(client: AsyncClient, database):
    user, headers = await create_user_and_get_headers()
    await add_notifications(user, 2)

    response = await client.get(f"{URL}/", headers=headers)

    assert response.status_code == 200
    assert len(response.json()["data"]["notifications"]) == 2

def test_page_params_offset():
    pagination = deps.PageParams(page="3", limit="5")
    assert (pagination.page, pagination.limit, pagination.offset) == (3, 5, 10)

    pagination = deps.PageParams()
    assert (pagination.page, pagination.limit, pagination.offset) == (1, 20, 0)

@pytest.mark.parametrize(
    "value, expected",
    [(None, 7), ("", 7), ("abc", 7), ("0", 7), ("-3", 7), ("4", 4), (" 12abc", 12), ("+2", 2)],
)
def test_parse_positive_int(value, expected):
    assert deps.parse_positive_int(value, 7) == expected

@pytest.mark.asyncio
async def test_mark_one_read(client: AsyncClient, database):
    user, headers = await create_user_and_get_headers()
    target, other = await add_notifications(user, 2)

    response = await client.put(f"{URL}/{target.id}/read", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["notification"]["id"] == str(target.id)
    assert body["data"]["notification"]["read"] is True

    assert (await Notification.get(target.id)).read is True
    assert (await Notification.get(other.id)).read is False

    response = await client.get(URL, headers=headers)
    assert response.json()["data"]["unreadCount"] == 1

@pytest.mark.asyncio
async def test_mark_read_on_someone_elses_notification_is_not_found(client: AsyncClient, database):
    owner, _ = await create_user_and_get_headers()
    _, intruder_headers = await create_user_and_get_headers()
    (notification,) = await add_notifications(owner, 1)

    response = await client.put(f"{URL}/{notification.id}/read", headers=intruder_headers)

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Notification not found"}
    assert (await Notification.get(notification.id)).read is False

@pytest.mark.asyncio
@pytest.mark.parametrize("notification_id", ["65f1c0ffee0000000000beef", "not-an-object-id"])
async def test_mark_read_unknown_id_is_not_found(client: AsyncClient, database, notification_id):
    _, headers = await create_user_and_get_headers()

    response = await client.put(f"{URL}/{notification_id}/read", headers=headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Notification not found"

@pytest.mark.asyncio
async def test_mark_all_read_is_idempotent(client: AsyncClient, database):
    user, headers = await create_user_and_get_headers()
    other, _ = await create_user_and_get_headers()
    await add_notifications(user, 4)
    await add_notifications(other, 2)

    response = await client.put(f"{URL}/read-all", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "All notifications marked as read"}

    response = await client.get(URL, headers=headers)
    assert response.json()["data"]["unreadCount"] == 0

    response = await client.put(f"{URL}/read-all", headers=headers)
    assert response.status_code == 200
    assert await notification_service.mark_all_read(user.id) == 0

    response = await client.get(URL, headers=headers)
    assert response.json()["data"]["unreadCount"] == 0

    # Other users are untouched
    assert await notification_service.count_unread(other.id) == 2

@pytest.mark.asyncio
async def test_store_failure_becomes_generic_server_error(client: AsyncClient, database, monkeypatch):
    _, headers = await create_user_and_get_headers()

    async def broken(*args, **kwargs):
        raise PyMongoError("connection reset")

    monkeypatch.setattr(notification_service, "list_notifications", broken)
    monkeypatch.setattr(notification_service, "mark_all_read", broken)
    monkeypatch.setattr(notification_service, "mark_read", broken)

    response = await client.get(URL, headers=headers)
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server error fetching notifications"}

    response = await client.put(f"{URL}/read-all", headers=headers)
    assert response.status_code == 500
    assert response.json()["message"] == "Server error updating notifications"

    response = await client.put(f"{URL}/65f1c0ffee0000000000beef/read", headers=headers)
    assert response.status_code == 500
    assert response.json()["message"] == "Server error updating notification"
