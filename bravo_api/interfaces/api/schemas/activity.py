"""Pydantic schemas for activity tracking endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel

ReportRow = dict[str, JsonValue]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class ActivitySessionRead(_CamelModel):
    login_time: str = Field(..., description="Login time of day (HH:MM)")
    logout_time: str | None = Field(
        None, description="Logout time of day (HH:MM), null while the session is open"
    )
    duration: str | None = Field(None, description="Session length (H:MM)")


class ActivityReportRead(_CamelModel):
    date: str = Field(..., description="Business date covered by the report (YYYY-MM-DD)")
    sessions: list[ActivitySessionRead] = Field(default_factory=list)
    collections: list[ReportRow] = Field(default_factory=list)
    inventory_sold: list[ReportRow] = Field(default_factory=list)
    orders: list[ReportRow] = Field(default_factory=list)
    customer_views: list[ReportRow] = Field(default_factory=list)
    item_views: list[ReportRow] = Field(default_factory=list)
    visit_summaries: list[ReportRow] = Field(default_factory=list)


class ActivityReportResponse(BaseModel):
    success: bool = True
    data: ActivityReportRead


class ActivityViewCreate(_CamelModel):
    event_type: str | None = Field(
        None, description="Either customer_view or item_view"
    )
    event_data: dict[str, JsonValue] | None = Field(
        None, description="Free-form data describing the viewed record"
    )


class SuccessResponse(BaseModel):
    success: bool = True


__all__ = [
    "ActivityReportRead",
    "ActivityReportResponse",
    "ActivitySessionRead",
    "ActivityViewCreate",
    "SuccessResponse",
]
