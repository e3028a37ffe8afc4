"""FastAPI application factory."""

import logging

from fastapi import FastAPI, File, Query, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from calgooo.api.models import BootstrapRequest, MealCreateRequest, OverrideRequest
from calgooo.app_logging import configure_logging
from calgooo.containers import AppContainer
from calgooo.domain.macros import Meal
from calgooo.domain.streaks import StreakSummary
from calgooo.domain.uploads import UploadRecord
from calgooo.services.calendar import parse_day_key


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Calgooo")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount(
        "/uploads",
        StaticFiles(directory=container.settings.upload_dir),
        name="uploads",
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_payload(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request fields with the API error shape."""
        fields = sorted(
            {".".join(str(part) for part in err["loc"][1:]) for err in exc.errors()}
        )
        logger.info("Rejected request", extra={"path": request.url.path})
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "bad_request",
            "invalid fields: " + ", ".join(fields),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/v1/users/bootstrap")
    async def bootstrap(
        request: Request, payload: BootstrapRequest | None = None
    ) -> dict[str, object]:
        """Fabricate and store a macro plan for the onboarding goal."""
        state_container: AppContainer = request.app.state.container
        body = payload or BootstrapRequest()
        plan = state_container.goal_service.bootstrap(body.goal, body.timezone)
        return {"ok": True, "goals": plan.goals.to_dict(), "timezone": plan.timezone}

    @app.post("/v1/scan/analyze", response_model=None)
    async def analyze_scan(
        request: Request, image: UploadFile | None = File(default=None)
    ) -> dict[str, object] | JSONResponse:
        """Store a food photo and return canned suggestions."""
        if image is None:
            return _error(status.HTTP_400_BAD_REQUEST, "no_file", "image is required")
        state_container: AppContainer = request.app.state.container
        content = await image.read(state_container.settings.max_upload_bytes + 1)
        try:
            record, suggestions = state_container.scan_service.analyze(
                image.filename, content, str(request.base_url)
            )
        except ValueError as exc:
            logger.warning("Rejected upload", extra={"size": len(content)})
            return _error(413, "file_too_large", str(exc))
        return {
            "image": _serialize_upload(record),
            "suggestions": [suggestion.model_dump() for suggestion in suggestions],
        }

    @app.get("/v1/uploads")
    async def list_uploads(
        request: Request, limit: str | None = None
    ) -> dict[str, object]:
        """Return recent captures, newest first."""
        state_container: AppContainer = request.app.state.container
        records = state_container.upload_service.list_recent(limit)
        return {"items": [_serialize_upload(record) for record in records]}

    @app.post("/v1/meals", response_model=None)
    async def log_meal(
        request: Request, payload: MealCreateRequest | None = None
    ) -> dict[str, object] | JSONResponse:
        """Log a meal and return the date's running totals."""
        body = payload or MealCreateRequest()
        if not body.date or not body.type or body.macros is None:
            return _error(
                status.HTTP_400_BAD_REQUEST,
                "bad_request",
                "date, type, macros are required",
            )
        state_container: AppContainer = request.app.state.container
        meal, totals = state_container.meal_log_service.log_meal(
            day=body.date,
            meal_type=body.type,
            title=body.title,
            image_absolute_url=body.imageAbsoluteUrl,
            macros=body.macros,
        )
        return {
            "id": meal.id,
            "accepted": True,
            "item": _serialize_meal(meal),
            "totals": totals.to_dict(),
        }

    @app.get("/v1/meals")
    async def list_meals(
        request: Request, day: str | None = Query(default=None, alias="date")
    ) -> dict[str, object]:
        """Return the meals and totals for a date, defaulting to today."""
        state_container: AppContainer = request.app.state.container
        resolved_day = day or state_container.calendar.today_key()
        meals, totals = state_container.meal_log_service.list_meals(resolved_day)
        return {
            "date": resolved_day,
            "items": [_serialize_meal(meal) for meal in meals],
            "totals": totals.to_dict(),
        }

    @app.get("/v1/streaks")
    async def streak_summary(
        request: Request, weeks: str | None = None
    ) -> dict[str, object]:
        """Return the streak report for a rolling window of weeks."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.streak_service.compute_summary(weeks)
        return _serialize_summary(summary)

    @app.post("/v1/streaks/{day}/override", response_model=None)
    async def set_override(
        day: str, request: Request, payload: OverrideRequest | None = None
    ) -> dict[str, object] | JSONResponse:
        """Force or toggle the hit value for a date."""
        parsed = parse_day_key(day)
        if parsed is None:
            return _error(
                status.HTTP_400_BAD_REQUEST, "bad_date", "date must be YYYY-MM-DD"
            )
        state_container: AppContainer = request.app.state.container
        body = payload or OverrideRequest()
        key = parsed.isoformat()
        hit = state_container.streak_service.set_override(key, body.hit)
        return {"date": key, "hit": hit}

    return app


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


def _serialize_upload(record: UploadRecord) -> dict[str, object]:
    return {
        "id": record.id,
        "filename": record.filename,
        "url": record.url,
        "absoluteUrl": record.absolute_url,
        "createdAt": record.created_at.isoformat(),
    }


def _serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "type": meal.type,
        "title": meal.title,
        "imageAbsoluteUrl": meal.image_absolute_url,
        "macros": meal.macros.to_dict(),
        "createdAt": meal.created_at.isoformat(),
    }


def _serialize_summary(summary: StreakSummary) -> dict[str, object]:
    return {
        "range": {"start": summary.start, "end": summary.end, "weeks": summary.weeks},
        "goal": {"caloriesKcal": summary.goal_calories_kcal},
        "days": [
            {"date": day.date, "hit": day.hit, "score": day.score}
            for day in summary.days
        ],
        "currentStreak": summary.stats.current_streak,
        "bestStreak": summary.stats.best_streak,
        "hits7": summary.stats.hits_7,
        "hits30": summary.stats.hits_30,
        "earnedTiers": summary.stats.earned_tiers,
    }
