from pydantic import BaseModel, Field
from typing import Optional, List

from menupub.core.constants import MAX_PRICE, RecordStatus


# ---------- Category ----------
class CategoryBase(BaseModel):
    title: str
    title_en: Optional[str] = None
    title_it: Optional[str] = None
    title_es: Optional[str] = None
    text: Optional[str] = None
    text_en: Optional[str] = None
    text_it: Optional[str] = None
    text_es: Optional[str] = None
    status: RecordStatus = RecordStatus.active


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(BaseModel):
    title: Optional[str] = None
    title_en: Optional[str] = None
    title_it: Optional[str] = None
    title_es: Optional[str] = None
    text: Optional[str] = None
    text_en: Optional[str] = None
    text_it: Optional[str] = None
    text_es: Optional[str] = None
    status: Optional[RecordStatus] = None


class CategoryRead(CategoryBase):
    id: int
    restaurant_id: Optional[str] = None
    order: int = 0

    class Config:
        from_attributes = True


# ---------- Subcategory ----------
class SubcategoryBase(CategoryBase):
    category_id: int


class SubcategoryCreate(SubcategoryBase):
    pass


class SubcategoryUpdate(CategoryUpdate):
    category_id: Optional[int] = None


class SubcategoryRead(SubcategoryBase):
    id: int
    restaurant_id: Optional[str] = None
    order: int = 0

    class Config:
        from_attributes = True


# ---------- Menu Item ----------
class MenuItemBase(BaseModel):
    subcategory_id: int
    title: str
    title_en: Optional[str] = None
    title_it: Optional[str] = None
    title_es: Optional[str] = None
    text: Optional[str] = None
    text_en: Optional[str] = None
    text_it: Optional[str] = None
    text_es: Optional[str] = None
    description: str = ""
    description_en: Optional[str] = None
    description_it: Optional[str] = None
    description_es: Optional[str] = None
    price: float = Field(default=0, ge=0, le=MAX_PRICE)
    is_special: bool = False
    image_path: Optional[str] = None
    additional_image_url: Optional[str] = None
    model_3d_url: Optional[str] = None
    redirect_3d_url: Optional[str] = None
    status: RecordStatus = RecordStatus.active


class MenuItemCreate(MenuItemBase):
    pass


class MenuItemUpdate(BaseModel):
    subcategory_id: Optional[int] = None
    title: Optional[str] = None
    title_en: Optional[str] = None
    title_it: Optional[str] = None
    title_es: Optional[str] = None
    text: Optional[str] = None
    text_en: Optional[str] = None
    text_it: Optional[str] = None
    text_es: Optional[str] = None
    description: Optional[str] = None
    description_en: Optional[str] = None
    description_it: Optional[str] = None
    description_es: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0, le=MAX_PRICE)
    is_special: Optional[bool] = None
    image_path: Optional[str] = None
    additional_image_url: Optional[str] = None
    model_3d_url: Optional[str] = None
    redirect_3d_url: Optional[str] = None
    status: Optional[RecordStatus] = None


class MenuItemRead(MenuItemBase):
    id: int
    restaurant_id: Optional[str] = None
    # Rows read back are displayed, not validated
    price: Optional[float] = None
    order: int = 0

    class Config:
        from_attributes = True


# ---------- Add-on ----------
class AddonBase(BaseModel):
    title: str
    title_en: Optional[str] = None
    title_it: Optional[str] = None
    title_es: Optional[str] = None
    description: Optional[str] = None
    description_en: Optional[str] = None
    description_it: Optional[str] = None
    description_es: Optional[str] = None
    image_path: Optional[str] = None
    price: float = Field(default=0, ge=0, le=MAX_PRICE)
    category_id: Optional[int] = None
    subcategory_id: Optional[int] = None
    status: RecordStatus = RecordStatus.active


class AddonCreate(AddonBase):
    pass


class AddonUpdate(BaseModel):
    title: Optional[str] = None
    title_en: Optional[str] = None
    title_it: Optional[str] = None
    title_es: Optional[str] = None
    description: Optional[str] = None
    description_en: Optional[str] = None
    description_it: Optional[str] = None
    description_es: Optional[str] = None
    image_path: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0, le=MAX_PRICE)
    category_id: Optional[int] = None
    subcategory_id: Optional[int] = None
    status: Optional[RecordStatus] = None


class AddonRead(AddonBase):
    id: int
    restaurant_id: Optional[str] = None
    price: Optional[float] = None
    order: int = 0

    class Config:
        from_attributes = True


# ---------- Ordering ----------
class ReorderRequest(BaseModel):
    direction: str = Field(pattern="^(up|down)$")


class OrderUpdate(BaseModel):
    id: int
    order: int


# ---------- Bundle ----------
class MenuBundle(BaseModel):
    """Everything needed to render one category tab."""
    category: CategoryRead
    subcategories: List[SubcategoryRead] = []
    menu_items: List[MenuItemRead] = []
    addons: List[AddonRead] = []
