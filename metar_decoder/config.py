from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # repo root


class Settings(BaseSettings):
    """Application settings with validation.

    The OpenAI API key is required and raises a validation error if missing.
    Everything else has a working default and can be overridden through
    environment variables or the .env file.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")
    cors_allowed_origins: list[str] = Field(default=["*"], description="Origins allowed by the CORS middleware")

    # OpenAI - required for decoding
    openai_api_key: str = Field(min_length=1, description="OpenAI API key")
    openai_base_url: str = Field(default="https://api.openai.com/v1", description="OpenAI API base URL")
    openai_model: str = Field(default="gpt-4o", min_length=1, description="Chat model used to decode METARs")
    openai_max_completion_tokens: int = Field(default=1024, ge=1, description="Completion token limit per decode")
    openai_timeout_seconds: float = Field(default=60.0, gt=0, description="OpenAI request timeout")

    # Aviation Weather Center
    aviation_weather_base_url: str = Field(
        default="https://aviationweather.gov", description="Aviation Weather Center API base URL"
    )
    http_connect_timeout_seconds: float = Field(default=5.0, gt=0, description="Outbound connect timeout")
    http_read_timeout_seconds: float = Field(default=10.0, gt=0, description="Outbound read timeout")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", "openai_api_key", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure required strings are not just whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty")
        return v

    @field_validator("openai_base_url", "aviation_weather_base_url", mode="after")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URLs are http(s) and carry no trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base URL must be a valid http:// or https:// URL")
        return v.rstrip("/")


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Avoids re-reading the .env file on every request.

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"model": settings.openai_model}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
