"""Statistics (ESD) reference records. Produced externally, read-only here."""

import uuid
from typing import Any

from sqlalchemy import JSON, Column, String

from api.db import Base


def _uuid_str():
    return str(uuid.uuid4())


class Statistic(Base):
    __tablename__ = "statistics"

    id = Column(String(36), primary_key=True, default=_uuid_str)
    esd_name = Column(String(255), nullable=False, index=True)
    data = Column(JSON, nullable=True)  # remaining fields of the external document

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.data or {})
        payload["id"] = self.id
        payload["esdName"] = self.esd_name
        return payload
