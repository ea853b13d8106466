from .entity import Room as Room
from .factory import RoomDetails as RoomDetails
from .factory import RoomFactory as RoomFactory
from .repository import RoomRepository as RoomRepository
from .value_object import Rating as Rating
from .value_object import RoomName as RoomName
