from sqlalchemy import Column, String, Integer, ForeignKey, Text, DateTime, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from menupub.models.base import Base


class Subcategory(Base):
    __tablename__ = "subcategories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(String, ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)

    title = Column(String, nullable=False)
    title_en = Column(String, nullable=True)
    title_it = Column(String, nullable=True)
    title_es = Column(String, nullable=True)
    text = Column(Text, nullable=True)
    text_en = Column(Text, nullable=True)
    text_it = Column(Text, nullable=True)
    text_es = Column(Text, nullable=True)

    order = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default="active")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = relationship("Category", back_populates="subcategories")
    items = relationship("MenuItem", back_populates="subcategory", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_subcategories_category", "category_id"),
    )
