from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./data/database.sqlite"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 3001
    FRONTEND_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    DEFAULT_PAGE_LIMIT: int = 18
    SIMULATE_NETWORK_DELAY: bool = False
    RESET_DB: bool = False
    LOG_LEVEL: str = "INFO"
    SEED_DATA_DIR: str = "./data"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
