from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from event_planner.models.user import UserRole


class UserCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Name must be between 2 and 100 characters")
        return v

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v):
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password cannot exceed 72 bytes")
        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserRef(BaseModel):
    id: int
    email: str

    model_config = {
        "from_attributes": True
    }


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole
    created_at: datetime

    model_config = {
        "from_attributes": True
    }


class Requester(BaseModel):
    """Authenticated identity attached to every resource call."""

    id: int
    role: UserRole = UserRole.USER

    model_config = {
        "frozen": True
    }

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
