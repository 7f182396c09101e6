"""File-backed dashboards under /api. Delete removes the JSON file."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from api import config
from api.schemas.setting import (
    CreatedResponse,
    DashboardListResponse,
    MessageResponse,
    UpdateDashboardRequest,
)
from api.services.file_dashboard_service import FileDashboardStore

router = APIRouter(prefix="/api", tags=["dashboards"])


def get_file_store() -> FileDashboardStore:
    return FileDashboardStore(config.DASHBOARDS_DIR)


@router.get("/read")
def read_dashboard_file(
    dashboard_id: str | None = Query(None, alias="id"),
    store: FileDashboardStore = Depends(get_file_store),
):
    """Return the full stored document."""
    return store.read(dashboard_id)


@router.get("/list", response_model=DashboardListResponse)
def list_dashboard_files(
    status: str | None = None,
    store: FileDashboardStore = Depends(get_file_store),
):
    """Summaries of every readable dashboard file. Unreadable files are skipped."""
    return {"dashboards": store.list(status)}


@router.post("/create", response_model=CreatedResponse)
def create_dashboard_file(
    data: dict[str, Any] = Body(...),
    store: FileDashboardStore = Depends(get_file_store),
):
    return {"id": store.create(data)}


@router.patch("/update", response_model=MessageResponse)
def update_dashboard_file(
    dashboard_id: str | None = Query(None, alias="id"),
    body: UpdateDashboardRequest | None = None,
    store: FileDashboardStore = Depends(get_file_store),
):
    """Validate and store detailInfo. The id may come from the query string or the body."""
    body = body or UpdateDashboardRequest()
    if dashboard_id is None and body.id is not None:
        dashboard_id = str(body.id)
    store.update(dashboard_id, detail_info=body.detail_info)
    return {"message": "대시보드 업데이트 성공"}


@router.delete("/delete", response_model=MessageResponse)
def delete_dashboard_file(
    dashboard_id: str | None = Query(None, alias="id"),
    store: FileDashboardStore = Depends(get_file_store),
):
    store.delete(dashboard_id)
    return {"message": "대시보드 삭제 성공"}
