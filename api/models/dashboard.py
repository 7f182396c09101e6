"""Dashboard setting document stored in the database."""

import uuid
from typing import Any

from sqlalchemy import JSON, Column, Integer, String

from api.db import Base


def _uuid_str():
    return str(uuid.uuid4())


class DashboardSetting(Base):
    __tablename__ = "dashboard_settings"

    # insertion order for listing; the public identity is `id`
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True, default=_uuid_str)
    dashboard_name = Column(String(255), nullable=False, index=True)  # copy of dashboard_info.dashboardName
    dashboard_info = Column(JSON, nullable=False)
    detail_info = Column(JSON, nullable=True)
    status = Column(String(16), nullable=False, index=True)
    created_at = Column(String(19), nullable=False)
    updated_at = Column(String(19), nullable=True)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "dashboardInfo": self.dashboard_info,
        }
        if self.detail_info is not None:
            data["detailInfo"] = self.detail_info
        data["status"] = self.status
        data["createdAt"] = self.created_at
        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at
        return data
