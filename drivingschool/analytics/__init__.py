"""Analytics: operational reports and per-role dashboards."""

from drivingschool.analytics.reports import ReportsConfig, run_report
from drivingschool.analytics.dashboard import DashboardConfig, get_dashboard_stats

__all__ = ["ReportsConfig", "run_report", "DashboardConfig", "get_dashboard_stats"]
