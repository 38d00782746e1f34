"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_rota.adapters.supabase_schedule_committer import SupabaseScheduleCommitter
from meal_rota.adapters.supabase_trip_repository import SupabaseTripRepository
from meal_rota.config import Settings
from meal_rota.services.schedule import ScheduleService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    schedule_service: ScheduleService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    schedule_service = ScheduleService(
        trip_repository=SupabaseTripRepository(supabase_client),
        committer=SupabaseScheduleCommitter(supabase_client),
        candidate_limit=resolved_settings.candidate_limit,
        exhaustive_pool_limit=resolved_settings.exhaustive_pool_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        schedule_service=schedule_service,
    )
