from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .value_object import BookingId as BookingId
from .value_object import StayPeriod as StayPeriod
