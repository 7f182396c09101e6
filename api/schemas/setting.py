"""Pydantic schemas for dashboard request and response bodies."""

from typing import Any

from pydantic import BaseModel, Field


class CreateDashboardRequest(BaseModel):
    """Body of POST /api/setting/create. Presence of the names is checked by the store."""

    dashboard_info: dict[str, Any] | None = Field(None, alias="dashboardInfo")

    model_config = {"populate_by_name": True}


class UpdateDashboardRequest(BaseModel):
    """Body of PATCH update. Either info object may be omitted."""

    id: str | int | None = None
    dashboard_info: dict[str, Any] | None = Field(None, alias="dashboardInfo")
    detail_info: dict[str, Any] | None = Field(None, alias="detailInfo")

    model_config = {"populate_by_name": True}


class CreatedResponse(BaseModel):
    id: str | int


class MessageResponse(BaseModel):
    message: str


class DashboardSummary(BaseModel):
    """Row of the file-backed dashboard list."""

    id: int | str = ""
    dashboard_name: str = Field("", alias="dashboardName")
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("-", alias="updatedAt")
    status: str = ""

    model_config = {"populate_by_name": True}


class DashboardListResponse(BaseModel):
    dashboards: list[DashboardSummary] = Field(default_factory=list)


class StatisticsListResponse(BaseModel):
    # external documents, passed through untouched
    statistics: list[dict[str, Any]] = Field(default_factory=list)
