from .money import Money as Money
from .room_id import RoomId as RoomId
from .user_id import UserId as UserId
