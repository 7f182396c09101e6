"""
Shared dashboard core: status values, timestamp format and the store interface.

Two adapters implement DashboardStore: the database one (api.services.setting_service)
and the JSON-file one (api.services.file_dashboard_service). They differ in identity,
delete policy and the name of the aggregate list in detailInfo; see each adapter.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from api.config import APP_TIMEZONE

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class DashboardStatus:
    CREATED = "CREATED"
    COMPLETED = "COMPLETED"
    DELETED = "DELETED"


def formatted_date(now: datetime | None = None) -> str:
    """Render `now` (default: current time) as local 'YYYY-MM-DD HH:MM:SS'."""
    tz = ZoneInfo(APP_TIMEZONE)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)
    return now.strftime(TIMESTAMP_FORMAT)


def has_items(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


class DashboardStore(ABC):
    """Create, list, read, update and delete dashboards against one backend."""

    @abstractmethod
    def create(self, data: dict[str, Any]) -> Any:
        """Persist a new dashboard with status CREATED and return its id."""

    @abstractmethod
    def list(self, status: str | None = None) -> list[dict[str, Any]]:
        """Return live dashboards, optionally only those with exactly `status`."""

    @abstractmethod
    def read(self, dashboard_id: Any) -> dict[str, Any]:
        ...

    @abstractmethod
    def update(self, dashboard_id: Any, detail_info: dict[str, Any] | None = None) -> None:
        """Replace detailInfo, refresh updatedAt and re-evaluate completion."""

    @abstractmethod
    def delete(self, dashboard_id: Any) -> None:
        ...
