from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # App settings
    PROJECT_NAME: str = "FinanceInsights"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    CORS_ORIGINS: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:8000",
        ]
    )

    # Analytics
    DEFAULT_CURRENCY: str = Field(default="USD")
    MONTHLY_TREND_MONTHS: int = Field(default=6, ge=1)
    RECENT_TRANSACTIONS_LIMIT: int = Field(default=5, ge=1)


settings = Settings()
