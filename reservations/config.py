from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reservations.domain.value_objects.reservation_policy import ReservationPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="RESERVATIONS_", extra="ignore")

    min_start_offset_hours: float = Field(default=24, ge=1, le=24)
    max_duration_days: int = Field(default=365, gt=0)
    log_level: str = "INFO"

    def reservation_policy(self) -> ReservationPolicy:
        return ReservationPolicy.from_hours(self.min_start_offset_hours, self.max_duration_days)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
