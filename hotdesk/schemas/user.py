from typing import List, Literal, Optional
from pydantic import BaseModel, EmailStr
from datetime import date, datetime

Batch = Literal["batch1", "batch2"]


# Properties to receive via API on creation (POST /auth/register)
class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str
    batch: Batch
    designated_seat_id: Optional[int] = None


# Properties to receive via API on admin creation (POST /auth/admin/register)
class AdminCreate(UserCreate):
    admin_secret: str


# Batch switch (PATCH /me/batch)
class BatchSwitch(BaseModel):
    new_batch: Batch
    effective_date: Optional[date] = None


# Properties returned via API
class User(BaseModel):
    id: str
    name: str
    email: str
    batch: str
    designated_seat_id: Optional[int] = None
    floater_leave_count: int = 0
    is_admin: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserList(BaseModel):
    users: List[User]


class Token(BaseModel):
    access_token: str
    token_type: str
    user: User
