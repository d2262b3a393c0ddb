from sqlalchemy import Column, String, Integer, Float, Boolean, ForeignKey, Text, DateTime, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from menupub.models.base import Base


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(String, ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id", ondelete="CASCADE"), nullable=False)

    title = Column(String, nullable=False)
    title_en = Column(String, nullable=True)
    title_it = Column(String, nullable=True)
    title_es = Column(String, nullable=True)
    text = Column(Text, nullable=True)
    text_en = Column(Text, nullable=True)
    text_it = Column(Text, nullable=True)
    text_es = Column(Text, nullable=True)
    description = Column(Text, nullable=False, default="")
    description_en = Column(Text, nullable=True)
    description_it = Column(Text, nullable=True)
    description_es = Column(Text, nullable=True)

    price = Column(Float, nullable=False, default=0)
    is_special = Column(Boolean, nullable=False, default=False)

    image_path = Column(String, nullable=True)
    additional_image_url = Column(String, nullable=True)
    model_3d_url = Column(String, nullable=True)     # .glb viewer model
    redirect_3d_url = Column(String, nullable=True)  # AR (usdz) model

    order = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default="active")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    restaurant = relationship("Restaurant", back_populates="menu_items")
    subcategory = relationship("Subcategory", back_populates="items")

    __table_args__ = (
        Index("idx_menu_items_restaurant", "restaurant_id"),
        Index("idx_menu_items_subcategory", "subcategory_id"),
    )
