from pydantic import BaseModel
from datetime import datetime


class UserBase(BaseModel):
    email: str


class User(UserBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
