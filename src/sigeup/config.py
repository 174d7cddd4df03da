from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "시급 계산기"
    debug: bool = False

    # Pre-filled hourly wage field
    default_hourly_wage: str = "10300"

    weekly_holiday_min_hours: Decimal = Decimal("15")
    currency_suffix: str = "원"


settings = Settings()
