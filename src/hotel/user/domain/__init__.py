from .entity import User as User
from .repository import UserRepository as UserRepository
