from typing import Annotated, Any, List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_MONGODB_URL = "mongodb://127.0.0.1:27017/greenstagram"

class Settings(BaseSettings):
    """
    Application configuration settings.

    Loads values from environment variables or .env file.
    """
    PROJECT_NAME: str = "Greenstagram API"
    API_PREFIX: str = "/api"
    NODE_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # DATABASE
    MONGODB_URI: str | None = Field(default=None, description="MongoDB connection URI")
    MONGODB_CONNECTION_STRING: str | None = Field(default=None, description="Alternative name for the MongoDB URI")
    MONGODB_DB_NAME: str = "greenstagram"

    # SECURITY
    JWT_SECRET: str = Field(description="Secret key for JWT signing")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60 * 24 * 7

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    # RATE LIMITING
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    # AZURE
    AZURE_KEY_VAULT_URL: str | None = None

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> Any:
        """
        Parses comma-separated string of CORS origins into a list.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    @property
    def mongodb_url(self) -> str:
        return self.MONGODB_URI or self.MONGODB_CONNECTION_STRING or DEFAULT_MONGODB_URL

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

settings = Settings()
