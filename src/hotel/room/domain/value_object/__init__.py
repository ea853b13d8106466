from .rating import Rating as Rating
from .room_name import RoomName as RoomName
