from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from menupub.core.constants import MIN_PASSWORD_LENGTH


class SignupRequest(BaseModel):
    restaurant_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = ""
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    confirm_password: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class SessionInfo(BaseModel):
    user_id: str
    email: str
    restaurant_id: Optional[str] = None
    restaurant_slug: Optional[str] = None
    is_super_admin: bool = False
