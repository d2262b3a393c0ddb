from .base import Base
from .user import User, AdminRole
from .restaurant import Restaurant
from .menu import (
    Category,
    Subcategory,
    MenuItem,
    Addon,
)
