"""Database-backed dashboards. Deletes are soft: the row stays with status DELETED."""

import logging
import uuid
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.errors import (
    DuplicateNameError,
    NotFoundError,
    ReferenceNotFoundError,
    StoreError,
    ValidationError,
)
from api.models.dashboard import DashboardSetting
from api.models.statistics import Statistic
from api.services.dashboard_store import DashboardStatus, DashboardStore, formatted_date, has_items

logger = logging.getLogger(__name__)

MSG_REQUIRED_NAMES = "대시보드 이름 및 ESD 이름은 필수입니다."
MSG_DUPLICATE_NAME = "이미 존재하는 대시보드 이름입니다."
MSG_ESD_NOT_FOUND = "해당 이름을 가진 ESD가 존재하지 않습니다."
MSG_ID_REQUIRED = "id 값이 필요합니다"
MSG_ID_INVALID = "유효하지 않은 id 값입니다"
MSG_NOT_FOUND = "대시보드를 찾을 수 없습니다"


def _normalize_id(dashboard_id: Any) -> str:
    """Validate the id as a UUID and return its canonical string form."""
    if not dashboard_id:
        raise ValidationError(MSG_ID_REQUIRED)
    try:
        return str(uuid.UUID(str(dashboard_id)))
    except ValueError:
        raise ValidationError(MSG_ID_INVALID)


def _is_name(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class DatabaseDashboardStore(DashboardStore):
    """
    Dashboards as JSON documents in the dashboard_settings table.

    Completion is judged on detailInfo.groupData and detailInfo.aggregateData.
    """

    def __init__(self, db: Session):
        self.db = db

    def _live_query(self):
        return self.db.query(DashboardSetting).filter(DashboardSetting.status != DashboardStatus.DELETED)

    def _get_live(self, dashboard_id: str) -> DashboardSetting:
        dashboard = self._live_query().filter(DashboardSetting.id == dashboard_id).first()
        if not dashboard:
            raise NotFoundError(MSG_NOT_FOUND)
        return dashboard

    def _name_taken(self, name: str, exclude_id: str | None = None) -> bool:
        query = self._live_query().filter(DashboardSetting.dashboard_name == name)
        if exclude_id is not None:
            query = query.filter(DashboardSetting.id != exclude_id)
        return query.first() is not None

    def create(self, dashboard_info: dict[str, Any] | None) -> str:
        if (
            not isinstance(dashboard_info, dict)
            or not _is_name(dashboard_info.get("dashboardName"))
            or not _is_name(dashboard_info.get("esdName"))
        ):
            raise ValidationError(MSG_REQUIRED_NAMES)
        name = dashboard_info["dashboardName"]
        try:
            if self._name_taken(name):
                raise DuplicateNameError(MSG_DUPLICATE_NAME)
            esd = self.db.query(Statistic).filter(Statistic.esd_name == dashboard_info["esdName"]).first()
            if not esd:
                raise ReferenceNotFoundError(MSG_ESD_NOT_FOUND)

            dashboard = DashboardSetting(
                dashboard_name=name,
                dashboard_info=dashboard_info,
                status=DashboardStatus.CREATED,
                created_at=formatted_date(),
            )
            self.db.add(dashboard)
            self.db.commit()
            self.db.refresh(dashboard)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Create dashboard failed (name=%s)", name)
            raise StoreError("대시보드 생성 실패") from e
        logger.info("Dashboard created id=%s name=%s", dashboard.id, name)
        return dashboard.id

    def list(self, status: str | None = None) -> list[dict[str, Any]]:
        try:
            query = self._live_query()
            if status:
                query = query.filter(DashboardSetting.status == status)
            dashboards = query.order_by(DashboardSetting.seq).all()
        except SQLAlchemyError as e:
            logger.exception("List dashboards failed (status=%s)", status)
            raise StoreError("대시보드 리스트 조회 실패") from e
        return [d.to_dict() for d in dashboards]

    def read(self, dashboard_id: Any) -> dict[str, Any]:
        key = _normalize_id(dashboard_id)
        try:
            return self._get_live(key).to_dict()
        except SQLAlchemyError as e:
            logger.exception("Read dashboard failed (id=%s)", key)
            raise StoreError("대시보드 조회 실패") from e

    def update(
        self,
        dashboard_id: Any,
        detail_info: dict[str, Any] | None = None,
        dashboard_info: dict[str, Any] | None = None,
    ) -> None:
        """Replace whichever of dashboardInfo / detailInfo is given; status only moves forward."""
        key = _normalize_id(dashboard_id)
        try:
            dashboard = self._get_live(key)
            if dashboard_info is not None:
                name = dashboard_info.get("dashboardName")
                if not _is_name(name):
                    raise ValidationError(MSG_REQUIRED_NAMES)
                if name != dashboard.dashboard_name and self._name_taken(name, exclude_id=key):
                    raise DuplicateNameError(MSG_DUPLICATE_NAME)
                dashboard.dashboard_info = dashboard_info
                dashboard.dashboard_name = name
            if detail_info is not None:
                dashboard.detail_info = detail_info
                if has_items(detail_info.get("groupData")) and has_items(detail_info.get("aggregateData")):
                    dashboard.status = DashboardStatus.COMPLETED
            dashboard.updated_at = formatted_date()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Update dashboard failed (id=%s)", key)
            raise StoreError("대시보드 업데이트 실패") from e
        logger.info("Dashboard updated id=%s status=%s", key, dashboard.status)

    def delete(self, dashboard_id: Any) -> None:
        key = _normalize_id(dashboard_id)
        try:
            dashboard = self._get_live(key)
            dashboard.status = DashboardStatus.DELETED
            dashboard.updated_at = formatted_date()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Delete dashboard failed (id=%s)", key)
            raise StoreError("대시보드 삭제 실패") from e
        logger.info("Dashboard deleted id=%s", key)
