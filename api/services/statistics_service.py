"""Statistics service: read-only listing of externally produced ESD records."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.errors import StoreError
from api.models.statistics import Statistic

logger = logging.getLogger(__name__)


def list_statistics(db: Session) -> list[dict[str, Any]]:
    """Return every statistics record, unfiltered."""
    try:
        records = db.query(Statistic).all()
    except SQLAlchemyError as e:
        logger.exception("List statistics failed")
        raise StoreError("서버 오류") from e
    return [r.to_dict() for r in records]
