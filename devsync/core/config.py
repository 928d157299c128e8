from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "devsync"

    DATABASE_URL: str = "sqlite+pysqlite:///./devsync.db"
    SQL_ECHO: bool = False

    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    SEARCH_DEFAULT_PAGE_SIZE: int = 10
    SEARCH_MAX_PAGE_SIZE: int = 200
    SEARCH_MAX_PAGE_NUMBER: int = 1_000_000

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
