from pydantic import BaseModel
from typing import Optional, List, Dict
from datetime import datetime

from menupub.core.constants import MenuTemplate
from menupub.schemas.section import Section


class RestaurantRead(BaseModel):
    id: str
    name: str
    slug: str
    email: str
    phone: str
    logo_url: Optional[str] = None
    primary_color: str
    accent_color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    font_family: Optional[str] = None
    is_active: bool
    template: MenuTemplate
    has_completed_onboarding: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RestaurantUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    logo_url: Optional[str] = None
    primary_color: Optional[str] = None
    accent_color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    font_family: Optional[str] = None


class TemplateSelection(BaseModel):
    template: MenuTemplate


class PublishResult(BaseModel):
    slug: str
    template: MenuTemplate
    url: str


class RestaurantBranding(BaseModel):
    name: str
    slug: str
    logo_url: Optional[str] = None
    primary_color: str
    accent_color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    font_family: Optional[str] = None
    template: MenuTemplate

    class Config:
        from_attributes = True


class CategoryTab(BaseModel):
    id: int
    title: str
    text: str = ""


class PublicMenu(BaseModel):
    restaurant: RestaurantBranding
    language: str
    categories: List[CategoryTab] = []
    active_tab: Optional[int] = None
    sections: List[Section] = []


class RestaurantSummary(BaseModel):
    id: str
    name: str
    slug: str
    is_active: bool
    template: MenuTemplate
    item_count: int = 0


# ---------- Super admin ----------
class ModelItemRead(BaseModel):
    id: int
    title: str
    image_path: Optional[str] = None
    model_3d_url: Optional[str] = None
    restaurant_id: str

    class Config:
        from_attributes = True


class ModelItemGroup(BaseModel):
    restaurant_name: str
    items: List[ModelItemRead] = []


class ModelUrlUpdate(BaseModel):
    model_3d_url: Optional[str] = None


ModelItemGroups = Dict[str, ModelItemGroup]
