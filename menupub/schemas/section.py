from pydantic import BaseModel
from typing import Optional, List


class DisplayItem(BaseModel):
    id: int
    image: Optional[str] = None
    title: str
    subtitle: str = ""
    price_label: str
    has_3d: bool = False
    model_3d_primary_url: Optional[str] = None
    model_3d_ar_url: Optional[str] = None


class Section(BaseModel):
    title: str
    subtitle: Optional[str] = None
    is_special: bool = False
    items: List[DisplayItem] = []
