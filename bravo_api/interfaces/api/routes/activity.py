"""Endpoints for recording and reporting user activity."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query, status

from bravo_api.application.use_cases.activity import (
    build_activity_report,
    log_client_view,
)
from bravo_api.domain.entities import ROLE_ADMIN, ROLE_MANAGER, User
from bravo_api.domain.exceptions import StorageError, ValidationError
from bravo_api.infrastructure.repositories import ActivityLogRepository
from bravo_api.interfaces.api.dependencies import (
    get_activity_store,
    get_current_user,
    require_roles,
)
from bravo_api.interfaces.api.schemas import (
    ActivityReportRead,
    ActivityReportResponse,
    ActivityViewCreate,
    SuccessResponse,
)
from bravo_api.utils import is_business_date, today_business_date

router = APIRouter(prefix="/activity", tags=["activity"])
logger = logging.getLogger(__name__)


@router.get("/report", response_model=ActivityReportResponse)
def read_activity_report(
    date: str | None = Query(
        None, description="Business date to report (YYYY-MM-DD); defaults to today"
    ),
    store: ActivityLogRepository = Depends(get_activity_store),
    _: User = Depends(require_roles(ROLE_MANAGER, ROLE_ADMIN)),
) -> ActivityReportResponse:
    """Return the grouped activity of a single business date."""

    business_date = date or today_business_date()
    if not is_business_date(business_date):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="date must be a calendar date formatted as YYYY-MM-DD",
        )

    try:
        report = build_activity_report(store, business_date)
    except StorageError as exc:
        logger.error("Activity report for %s could not be built: %s", business_date, exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Activity report is temporarily unavailable",
        ) from exc

    return ActivityReportResponse(data=ActivityReportRead.model_validate(asdict(report)))


@router.post("/log-view", response_model=SuccessResponse)
def log_view(
    payload: ActivityViewCreate,
    store: ActivityLogRepository = Depends(get_activity_store),
    current_user: User = Depends(get_current_user),
) -> SuccessResponse:
    """Record a customer or item view reported by the client."""

    try:
        log_client_view(
            store,
            actor_id=current_user.id,
            actor_display_name=current_user.username,
            event_kind=payload.event_type or "",
            payload=payload.event_data or {},
            logger=logger,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return SuccessResponse()


__all__ = ["router"]
