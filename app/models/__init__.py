from app.models.badge import Badge
from app.models.challenge import Challenge
from app.models.eco_quote import EcoQuote
from app.models.notification import Notification
from app.models.post import Post
from app.models.user import User

DOCUMENT_MODELS = [User, Post, Challenge, Badge, EcoQuote, Notification]

__all__ = ["Badge", "Challenge", "EcoQuote", "Notification", "Post", "User", "DOCUMENT_MODELS"]
