from hotel.booking.handlers.response_models import BookingData, to_booking_data
from hotel.dashboard.applications.get_dashboard_stats import DashboardStats
from hotel.shared.utils import ResponseModel


class DashboardStatsData(ResponseModel):
    """ダッシュボード集計のレスポンスモデル"""

    total_bookings: int
    total_guests: int
    total_users: int
    revenue: str
    recent_bookings: list[BookingData]


def to_dashboard_stats_data(stats: DashboardStats) -> DashboardStatsData:
    return DashboardStatsData(
        total_bookings=stats.total_bookings,
        total_guests=stats.total_guests,
        total_users=stats.total_users,
        revenue=str(stats.revenue.amount),
        recent_bookings=[to_booking_data(b) for b in stats.recent_bookings],
    )
