"""Database-backed dashboard settings: create, list, read, update, soft delete."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.db import get_db
from api.schemas.setting import (
    CreateDashboardRequest,
    CreatedResponse,
    MessageResponse,
    UpdateDashboardRequest,
)
from api.services.setting_service import DatabaseDashboardStore

router = APIRouter(prefix="/api/setting", tags=["setting"])


def get_setting_store(db: Session = Depends(get_db)) -> DatabaseDashboardStore:
    return DatabaseDashboardStore(db)


@router.post("/create", response_model=CreatedResponse)
def create_dashboard(
    body: CreateDashboardRequest | None = None,
    store: DatabaseDashboardStore = Depends(get_setting_store),
):
    """Create a dashboard. dashboardName must be unused and esdName must exist in statistics."""
    dashboard_info = body.dashboard_info if body else None
    return {"id": store.create(dashboard_info)}


@router.get("/list")
def list_dashboards(
    status: str | None = None,
    store: DatabaseDashboardStore = Depends(get_setting_store),
):
    """List dashboards that are not deleted, optionally with exactly the given status."""
    return store.list(status)


@router.get("/read")
def read_dashboard(
    dashboard_id: str | None = Query(None, alias="id"),
    store: DatabaseDashboardStore = Depends(get_setting_store),
):
    return store.read(dashboard_id)


@router.patch("/update", response_model=MessageResponse)
def update_dashboard(
    body: UpdateDashboardRequest | None = None,
    store: DatabaseDashboardStore = Depends(get_setting_store),
):
    """Replace dashboardInfo and/or detailInfo. Complete group and aggregate data mark it COMPLETED."""
    body = body or UpdateDashboardRequest()
    store.update(body.id, detail_info=body.detail_info, dashboard_info=body.dashboard_info)
    return {"message": "대시보드 업데이트 성공"}


@router.delete("/delete", response_model=MessageResponse)
def delete_dashboard(
    dashboard_id: str | None = Query(None, alias="id"),
    store: DatabaseDashboardStore = Depends(get_setting_store),
):
    """Mark the dashboard DELETED. The record is kept."""
    store.delete(dashboard_id)
    return {"message": "대시보드 삭제 성공"}
