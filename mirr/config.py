from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MIRR_"}

    # Root finder: stop once either tolerance is met
    estimate_tolerance: Decimal = Decimal("0.000000001")
    result_tolerance: Decimal = Decimal("0.000000001")
    root_max_iterations: int = 100

    # Bracket search: a rate cannot realistically be at or below -100%
    initial_low_estimate: Decimal = Decimal("-0.99999")
    initial_high_estimate: Decimal = Decimal("1.0")
    search_max_iterations: int = 100

    # App
    log_level: str = "INFO"


settings = Settings()
