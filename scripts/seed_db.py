import asyncio
import logging
import random
from datetime import timedelta
from faker import Faker

from app.db.init_db import init_db, seed_challenges
from app.db.session import close_client, get_database
from app.models import DOCUMENT_MODELS, Badge, EcoQuote, Post, User
from app.models.enums import BadgeCategory, NotificationType
from app.core.security import get_password_hash
from app.services.notifications import create_notification
from app.utils.dates import utc_now

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Constants
PASSWORD = "password123"
hashed_password = get_password_hash(PASSWORD)
fake = Faker()

BADGES = [
    ("first-post", "First Sprout", "Shared your first eco post", "🌱", BadgeCategory.ACTIVITY),
    ("challenge-champion", "Challenge Champion", "Completed five challenges", "🏆", BadgeCategory.CHALLENGE),
    ("week-streak", "Green Week", "Active seven days in a row", "🔥", BadgeCategory.STREAK),
    ("early-adopter", "Early Adopter", "Joined during the beta", "⭐", BadgeCategory.SPECIAL),
]

QUOTES = [
    ("The greatest threat to our planet is the belief that someone else will save it.", "Robert Swan"),
    ("We do not inherit the earth from our ancestors, we borrow it from our children.", None),
    ("What you do makes a difference, and you have to decide what kind of difference you want to make.", "Jane Goodall"),
]

NOTIFICATION_TEMPLATES = {
    NotificationType.LIKE: ("New like", "{name} liked your post"),
    NotificationType.COMMENT: ("New comment", "{name} commented on your post"),
    NotificationType.FOLLOW: ("New follower", "{name} started following you"),
    NotificationType.CHALLENGE: ("Challenge update", "A new challenge is live: Plant a Tree"),
    NotificationType.BADGE: ("Badge earned", "You earned the Green Week badge"),
    NotificationType.SYSTEM: ("Welcome", "Welcome to Greenstagram!"),
}

async def seed_data():
    await init_db(get_database())

    # 0. Clear Database
    logger.info("Clearing database...")
    for model in DOCUMENT_MODELS:
        await model.delete_all()
    logger.info("Database cleared.")

    # 1. Users
    logger.info("Creating users...")
    users = [
        User(username="greenadmin", email="admin@example.com", hashed_password=hashed_password, is_verified=True),
        User(username="ecojohn", email="john.doe@example.com", hashed_password=hashed_password, eco_points=420),
    ]
    for i in range(20):
        profile = fake.simple_profile()
        users.append(
            User(
                username=f"{profile['username']}{i}",
                email=f"user{i}_{profile['username']}@example.com",
                hashed_password=hashed_password,
                bio=fake.sentence(),
                eco_points=random.randint(0, 1000),
                current_streak=random.randint(0, 14),
            )
        )
    await User.insert_many(users)
    users = await User.find_all().to_list()
    logger.info(f"Created {len(users)} users.")

    # 2. Posts
    posts = []
    for user in users:
        for _ in range(random.randint(0, 3)):
            posts.append(
                Post(
                    user_id=user.id,
                    content=fake.paragraph(),
                    hashtags=random.sample(["recycle", "zerowaste", "plantlife", "solar", "compost"], 2),
                    is_eco_post=True,
                    created_at=utc_now() - timedelta(hours=random.randint(1, 24 * 30)),
                )
            )
    if posts:
        await Post.insert_many(posts)
    logger.info(f"Created {len(posts)} posts.")

    # 3. Challenges, badges, quotes
    await seed_challenges()
    await Badge.insert_many(
        [Badge(badge_id=b, name=n, description=d, icon=i, category=c) for b, n, d, i, c in BADGES]
    )
    await EcoQuote.insert_many([EcoQuote(text=t, author=a) for t, a in QUOTES])

    # 4. Notifications
    count = 0
    for user in users:
        for type_, (title, message) in random.sample(list(NOTIFICATION_TEMPLATES.items()), 3):
            actor = random.choice(users)
            notification = await create_notification(
                user.id, type_, title, message.format(name=actor.username), data={"actorId": str(actor.id)}
            )
            if random.random() < 0.4:
                notification.read = True
                await notification.save()
            count += 1
    logger.info(f"Created {count} notifications.")

    logger.info("Seeding complete. Log in with any seeded email and password '%s'.", PASSWORD)
    close_client()

if __name__ == "__main__":
    asyncio.run(seed_data())
