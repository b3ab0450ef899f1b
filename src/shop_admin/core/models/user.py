"""Request and response models for users."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from src.shop_admin.entities.enums import UserStatus

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class AddressRequest(BaseModel):
    street: str | None = None
    city: str | None = None
    country: str | None = None
    postal_code: str | None = None
    phone: str | None = None


class AddressResponse(AddressRequest):
    id: str


class UserCreationRequest(BaseModel):
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=8, max_length=128)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    dob: date | None = None
    addresses: list[AddressRequest] = Field(default_factory=list)


class UserUpdateRequest(BaseModel):
    """Partial update: only fields that are not ``None`` are applied."""

    password: str | None = Field(default=None, min_length=8, max_length=128)
    email: str | None = Field(default=None, pattern=EMAIL_PATTERN, max_length=255)
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    dob: date | None = None


class ChangePasswordRequest(BaseModel):
    old_password: str | None = None
    new_password: str = Field(min_length=8, max_length=128)


class UserResponse(BaseModel):
    id: str
    username: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    dob: date | None = None
    status: UserStatus
    roles: list[str] = Field(default_factory=list)
    addresses: list[AddressResponse] = Field(default_factory=list)
    created_at: datetime


class ExistsResponse(BaseModel):
    exists: bool
