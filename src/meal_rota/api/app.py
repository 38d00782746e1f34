"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from meal_rota.api.schedule_models import (
    GenerateScheduleRequest,
    GenerateScheduleResponse,
    ParticipantSummaryModel,
    ScheduleWarningModel,
)
from meal_rota.app_logging import configure_logging
from meal_rota.containers import AppContainer
from meal_rota.services.schedule import ScheduleResult, TripNotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/schedule/generate")
    def generate_schedule(
        payload: GenerateScheduleRequest, request: Request
    ) -> GenerateScheduleResponse:
        """Regenerate the cooking schedule of a trip."""
        state_container: AppContainer = request.app.state.container
        options = payload.to_options(
            state_container.settings.default_schedule_options()
        )
        try:
            result = state_container.schedule_service.generate(
                payload.trip_id, options
            )
        except TripNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except Exception:
            logger.exception(
                "Schedule generation failed", extra={"trip_id": payload.trip_id}
            )
            raise
        return _to_response(result)

    return app


def _to_response(result: ScheduleResult) -> GenerateScheduleResponse:
    return GenerateScheduleResponse(
        assigned_participants=result.assigned_participants,
        added_recipe_assignments=result.added_recipe_assignments,
        summary=[
            ParticipantSummaryModel(
                participant_id=entry.participant_id,
                participant_name=entry.participant_name,
                target_assignments=entry.target_assignments,
                final_assignments=entry.final_assignments,
                presence_ratio=entry.presence_ratio,
            )
            for entry in result.summary
        ],
        warnings=[
            ScheduleWarningModel(
                meal_slot_id=warning.meal_slot_id,
                date=warning.date,
                meal_type=warning.meal_type.value,
                reason=warning.reason,
            )
            for warning in result.warnings
        ],
    )
