"""Application configuration using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tasktracker.services.id_policy import IdPolicy


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )

    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Task Tracker"
    VERSION: str = "0.1.0"
    DEBUG: bool = Field(default=True, description="Debug mode (defaults to True for development)")

    # CORS
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description=(
            "Allowed CORS origins. "
            "Override in production via environment variables. "
            "Example: CORS_ORIGINS='[\"https://app.example.com\"]'"
        ),
    )

    # Task store
    ID_POLICY: IdPolicy = Field(
        default=IdPolicy.REUSED_INTEGER,
        description=(
            "Identifier policy for new tasks: 'reused_integer' assigns the smallest free "
            "positive integer, 'unique_random' assigns a random UUID4"
        ),
    )

    # Server
    HOST: str = Field(default="127.0.0.1", description="Address the server binds to")
    PORT: int = Field(default=3000, description="Port the server listens on")
    LOG_LEVEL: str = Field(default="info", description="Logging level name")

    @property
    def base_url(self) -> str:
        return f"http://{self.HOST}:{self.PORT}"


settings = Settings()
