from .booking_id import BookingId as BookingId
from .stay_period import StayPeriod as StayPeriod
