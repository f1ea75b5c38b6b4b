from pydantic import BaseModel, EmailStr, Field
from uuid import UUID

from app.schemas.base import BaseConfig, UTCDateTime


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8)


class UserResponse(BaseConfig):
    id: UUID
    name: str
    email: EmailStr
    created_at: UTCDateTime
