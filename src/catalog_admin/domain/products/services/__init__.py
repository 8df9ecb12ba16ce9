"""📊 Чисті доменні сервіси по знімку товарів."""

from .dashboard_stats import DashboardStats, compute_dashboard_stats

__all__ = ["DashboardStats", "compute_dashboard_stats"]
