from . import category, subcategory, menu_item, addon, ordering
