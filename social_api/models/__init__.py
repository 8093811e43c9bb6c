from .user import User, UserView
from .database import init_db
