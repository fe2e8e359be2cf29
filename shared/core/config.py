import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    APP_NAME: str = os.getenv("APP_NAME", "Asset Service API")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Comma separated list of front-end origins
    CORS_ORIGINS: str = os.getenv(
        "CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8003")

    # Stock thresholds
    LOW_STOCK_DEFAULT: int = int(os.getenv("LOW_STOCK_DEFAULT", 5))
    DEFAULT_RESTOCK_TARGET: int = int(os.getenv("DEFAULT_RESTOCK_TARGET", 10))

    # Straight-line depreciation, same for every asset
    USEFUL_LIFE_YEARS: int = int(os.getenv("USEFUL_LIFE_YEARS", 4))

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
