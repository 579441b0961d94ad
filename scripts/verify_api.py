import argparse
import asyncio
import httpx

from app.core.security import create_access_token

BASE_URL = "http://localhost:8000/api"

async def main(user_id: str, base_url: str):
    token = create_access_token(user_id)
    headers = {"Authorization": f"Bearer {token}"}

    async with httpx.AsyncClient(base_url=base_url) as client:
        # 1. Ping
        response = await client.get("/ping")
        print(f"Ping: {response.status_code} {response.json()}")

        # 2. List notifications
        response = await client.get("/notifications", params={"limit": 5}, headers=headers)
        if response.status_code != 200:
            print(f"Listing failed: {response.text}")
            return
        body = response.json()
        notifications = body["data"]["notifications"]
        print(f"Unread: {body['data']['unreadCount']}, page size: {len(notifications)}, hasMore: {body['pagination']['hasMore']}")

        # 3. Mark one read
        if notifications:
            first = notifications[0]["id"]
            response = await client.put(f"/notifications/{first}/read", headers=headers)
            print(f"Mark {first} read: {response.status_code}")

        # 4. Mark all read
        response = await client.put("/notifications/read-all", headers=headers)
        print(f"Mark all read: {response.status_code} {response.json()['message']}")

        # 5. Unknown route
        response = await client.get("/nonexistent")
        print(f"Unknown route: {response.status_code} {response.json()}")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Exercise the notification API of a running server.")
    parser.add_argument("user_id", help="ObjectId of an existing user")
    parser.add_argument("--base-url", default=BASE_URL)
    args = parser.parse_args()
    asyncio.run(main(args.user_id, args.base_url))
