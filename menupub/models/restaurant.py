# menupub/models/restaurant.py
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from menupub.models.base import Base
import uuid


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False, default="")
    owner_id = Column(String, ForeignKey("users.id"), nullable=False)

    # Branding
    logo_url = Column(String, nullable=True)
    primary_color = Column(String, nullable=False, default="#000000")
    accent_color = Column(String, nullable=True)
    background_color = Column(String, nullable=True)
    text_color = Column(String, nullable=True)
    font_family = Column(String, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    template = Column(String, nullable=False, default="template1")
    has_completed_onboarding = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="restaurants")
    categories = relationship("Category", back_populates="restaurant", cascade="all, delete-orphan")
    menu_items = relationship("MenuItem", back_populates="restaurant", cascade="all, delete-orphan")
