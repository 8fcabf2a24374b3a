# File: cardapp/schemas/user.py

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Role = Literal["user", "editor", "reader", "admin", "owner"]


class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr


class UserCreate(UserBase):
    password: str
    role: Optional[Role] = None


class UserLogin(BaseModel):
    username: str
    password: str


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    role: Role
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserRead


class ProfileResponse(BaseModel):
    user: UserRead
