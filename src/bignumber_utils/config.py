from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    exponential_at: int = Field(1_000_000_000, alias="BIGNUMBER_UTILS_EXPONENTIAL_AT", gt=0)
    precision: int = Field(1000, alias="BIGNUMBER_UTILS_PRECISION", ge=100)
    division_decimal_places: int = Field(
        20, alias="BIGNUMBER_UTILS_DIVISION_DECIMAL_PLACES", ge=0, le=1000
    )
    log_level: str = Field("WARNING", alias="BIGNUMBER_UTILS_LOG_LEVEL")
    service_name: str = Field("bignumber-utils", alias="BIGNUMBER_UTILS_SERVICE_NAME")
    environment: str = Field("local", alias="BIGNUMBER_UTILS_ENVIRONMENT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
