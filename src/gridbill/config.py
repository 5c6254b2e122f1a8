"""Application configuration."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loads and validates application settings from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    CONSUMER_ID_BASE: int = 1000
    METER_ID_BASE: int = 5000
    BILL_NO_BASE: int = 2000

    PAYMENT_DUE_DAYS: int = 15
    LATE_FEE: Decimal = Decimal("50")

    DUNNING_HOUR: int = 2
    DUNNING_MINUTE: int = 0
    RUN_SCHEDULER: bool = False

    LOG_LEVEL: str = "INFO"
    REPORTS_DIR: str = "reports"


settings = Settings()
