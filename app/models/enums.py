from enum import StrEnum

class NotificationType(StrEnum):
    LIKE = "like"
    COMMENT = "comment"
    FOLLOW = "follow"
    MENTION = "mention"
    CHALLENGE = "challenge"
    BADGE = "badge"
    SYSTEM = "system"

class ChallengeDifficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

class ChallengeStatus(StrEnum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"

class BadgeCategory(StrEnum):
    ACTIVITY = "activity"
    CHALLENGE = "challenge"
    STREAK = "streak"
    SPECIAL = "special"

class PostVisibility(StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"
    FRIENDS = "friends"
