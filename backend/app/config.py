from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    app_name: str = "Investor ESG API"
    log_level: str = "INFO"

    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Defaults used by the composite report when the profile omits them
    report_default_employee_count: int = 500
    report_kwh_per_investment_unit: float = 100  # annual kWh per unit of investment size

    model_config = {"env_file": ".env"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
