from beanie import Document

class EcoQuote(Document):
    text: str
    author: str | None = None
    category: str = "general"

    class Settings:
        name = "ecoquotes"
