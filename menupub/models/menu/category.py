from sqlalchemy import Column, String, Integer, ForeignKey, Text, DateTime, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from menupub.models.base import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(String, ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False)

    title = Column(String, nullable=False)
    title_en = Column(String, nullable=True)
    title_it = Column(String, nullable=True)
    title_es = Column(String, nullable=True)
    text = Column(Text, nullable=True)
    text_en = Column(Text, nullable=True)
    text_it = Column(Text, nullable=True)
    text_es = Column(Text, nullable=True)

    order = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default="active")  # active, inactive

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    restaurant = relationship("Restaurant", back_populates="categories")
    subcategories = relationship("Subcategory", back_populates="category", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_categories_restaurant", "restaurant_id"),
    )
