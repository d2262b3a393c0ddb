from .category import Category
from .subcategory import Subcategory
from .menu_item import MenuItem
from .addon import Addon
