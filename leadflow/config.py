from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Environment
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]  # Next.js frontend

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./leadflow.db"
    DATABASE_ECHO: bool = False

    # JWT Settings
    SECRET_KEY: str = "supersecretkey"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # API Settings
    API_PREFIX: str = "/api"

    # Pipeline defaults
    DEFAULT_CLOSE_DAYS: int = 30  # expected close date offset for new opportunities

    # Demo data (rep@example.com / manager@example.com, password123)
    SEED_DEMO_DATA: bool = False

    class Config:
        env_file = ".env"

settings = Settings()
