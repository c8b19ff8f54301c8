import os
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# .env values become environment variables before Settings reads them
load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Ship Registry"
    API_PREFIX: str = "/rest"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # PostgreSQL parts, read from the DB_* variables
    POSTGRES_USER: str = os.getenv("DB_USER", "ships")
    POSTGRES_PASSWORD: str = os.getenv("DB_PASSWORD", "ships")
    POSTGRES_SERVER: str = os.getenv("DB_HOST", "localhost")
    POSTGRES_PORT: str = os.getenv("DB_PORT", "5432")
    POSTGRES_DB: str = os.getenv("DB_NAME", "ships")
    # Wins over the parts above, e.g. "sqlite+aiosqlite:///./ships.db"
    DATABASE_URL: str | None = None
    SQL_ECHO: bool = False

    # Zone the production year is read in; stored dates are UTC
    SHIP_TIMEZONE: str = "UTC"
    DEFAULT_PAGE_SIZE: int = 3

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        # quote_plus keeps passwords with '@' or ':' from breaking the URL
        password = quote_plus(self.POSTGRES_PASSWORD)
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{password}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    class Config:
        case_sensitive = True


settings = Settings()
