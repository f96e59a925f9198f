from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

GEMINI_GENERATE_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.5-flash:generateContent"
)
DEFAULT_AI_TIMEOUT_SECONDS = 20.0
DEFAULT_AI_MAX_TOKENS = 32


class Settings(BaseSettings):
    # App
    APP_NAME: str = "BFHL Compute"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    OFFICIAL_EMAIL: str = ""

    # AI provider
    AI_API_URL: str = GEMINI_GENERATE_URL
    AI_API_KEY: str = ""
    AI_TIMEOUT_SECONDS: float = DEFAULT_AI_TIMEOUT_SECONDS
    AI_MAX_TOKENS: int = DEFAULT_AI_MAX_TOKENS

    # HTTP
    CORS_ALLOW_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore", frozen=True
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
