# busfleet/db/models/users/user.py
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime, timezone
from enum import Enum
import uuid


class UserRole(str, Enum):
    ADMIN = "Admin"
    STUDENT = "Student"
    DRIVER = "Driver"


class User(SQLModel, table=True):
    __tablename__ = "users"
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=100, unique=True, index=True)
    phone: Optional[str] = Field(max_length=20, default=None)
    gender: Optional[str] = Field(default=None)
    age: Optional[int] = Field(default=None)
    profile_picture: Optional[str] = Field(max_length=255, default=None)
    role: UserRole = Field(default=UserRole.STUDENT)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    notifications: List["NotificationRecord"] = Relationship(back_populates="user")
