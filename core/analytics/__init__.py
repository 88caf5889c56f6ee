"""
Analytics package exports.
"""

from core.analytics.constants import DIFFICULTY_LABELS, POOL_LABELS
from core.analytics.service import build_overview, build_statistics_dashboard
from core.analytics.types import PoolOverview, StatisticsDashboard

__all__ = [
    "DIFFICULTY_LABELS",
    "POOL_LABELS",
    "build_overview",
    "build_statistics_dashboard",
    "PoolOverview",
    "StatisticsDashboard",
]
