from .menu import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryRead,
    SubcategoryBase,
    SubcategoryCreate,
    SubcategoryUpdate,
    SubcategoryRead,
    MenuItemBase,
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemRead,
    AddonBase,
    AddonCreate,
    AddonUpdate,
    AddonRead,
    ReorderRequest,
    OrderUpdate,
    MenuBundle,
)

from .section import (
    DisplayItem,
    Section,
)
