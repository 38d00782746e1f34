"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from meal_rota.domain.schedule import ScheduleOptions

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    max_cooks_per_meal: int = 2
    max_helpers_per_meal: int = 0
    recipes_per_meal: int = 1
    prioritize_equal_participation: bool = False
    candidate_limit: int = 50
    exhaustive_pool_limit: int = 12
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def default_schedule_options(self) -> ScheduleOptions:
        """Scheduling knobs used when a request leaves them unset."""
        return ScheduleOptions(
            max_cooks_per_meal=self.max_cooks_per_meal,
            max_helpers_per_meal=self.max_helpers_per_meal,
            recipes_per_meal=self.recipes_per_meal,
            prioritize_equal_participation=self.prioritize_equal_participation,
        )
