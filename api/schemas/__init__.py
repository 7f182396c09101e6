"""Pydantic schemas for API requests and responses."""

from api.schemas.setting import (
    CreateDashboardRequest,
    UpdateDashboardRequest,
    CreatedResponse,
    MessageResponse,
    DashboardSummary,
    DashboardListResponse,
    StatisticsListResponse,
)

__all__ = [
    "CreateDashboardRequest",
    "UpdateDashboardRequest",
    "CreatedResponse",
    "MessageResponse",
    "DashboardSummary",
    "DashboardListResponse",
    "StatisticsListResponse",
]
