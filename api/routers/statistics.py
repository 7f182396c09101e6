"""Statistics API: read-only list of ESD reference records."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.db import get_db
from api.schemas.setting import StatisticsListResponse
from api.services.statistics_service import list_statistics

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


@router.get("/list", response_model=StatisticsListResponse)
def get_statistics_list(db: Session = Depends(get_db)):
    return {"statistics": list_statistics(db)}
