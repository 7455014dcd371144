from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    # Application Settings
    APP_NAME: str = "Course Mock API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    @property
    def debug(self) -> bool:
        return self.DEBUG

    # API Settings
    API_PREFIX: str = ""

    # Middleware
    CORS_ALLOW_ALL: bool = True
    REQUEST_LOGGING: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    # Storage (optional JSON file mirroring the in-memory store)
    DB_FILE: Optional[str] = None

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def host(self) -> str:
        return self.HOST

    @property
    def port(self) -> int:
        return self.PORT

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
