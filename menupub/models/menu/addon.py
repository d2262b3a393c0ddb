from sqlalchemy import Column, String, Integer, Float, ForeignKey, Text, DateTime, Index
from datetime import datetime
from menupub.models.base import Base


class Addon(Base):
    __tablename__ = "addons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(String, ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False)

    # Placement metadata only; add-ons are pooled per category bundle
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id", ondelete="SET NULL"), nullable=True)

    title = Column(String, nullable=False)
    title_en = Column(String, nullable=True)
    title_it = Column(String, nullable=True)
    title_es = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    description_en = Column(Text, nullable=True)
    description_it = Column(Text, nullable=True)
    description_es = Column(Text, nullable=True)

    image_path = Column(String, nullable=True)
    price = Column(Float, nullable=False, default=0)

    order = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default="active")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_addons_restaurant", "restaurant_id"),
    )
