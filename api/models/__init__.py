"""SQLAlchemy models."""

from api.models.dashboard import DashboardSetting
from api.models.statistics import Statistic

__all__ = ["DashboardSetting", "Statistic"]
