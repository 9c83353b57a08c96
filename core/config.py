from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    TELEGRAM_BOT_TOKEN: str | None = None
    TELEGRAM_CHAT_ID: str | None = None
    TELEGRAM_API_BASE_URL: AnyHttpUrl = "https://api.telegram.org"
    TELEGRAM_TIMEOUT_SECONDS: float = 20.0

    UPLOAD_DIR: str = "uploads"
    ALLOWED_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


def get_settings() -> Settings:
    return Settings()
