# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr, field_validator
from typing import List, Optional
from datetime import datetime

from storefront.domain.permissions import Permission


class SignupIn(BaseModel):
    """Schema dla rejestracji."""

    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)


class SigninIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RequestResetIn(BaseModel):
    email: EmailStr


class ResetPasswordIn(BaseModel):
    """Schema dla ustawienia nowego hasla tokenem z maila."""

    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1)
    reset_token: str = Field(..., min_length=1)


class MessageOut(BaseModel):
    message: str


class UserRead(BaseModel):
    """Schema dla uzytkownika (response)."""

    id: int
    name: str
    email: str
    permissions: List[Permission]

    model_config = ConfigDict(from_attributes=True)


class UpdatePermissionsIn(BaseModel):
    permissions: List[Permission]


class ItemCreate(BaseModel):
    """Schema dla tworzenia produktu. Cena w centach."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    image: Optional[str] = None
    large_image: Optional[str] = None


class ItemUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, ge=0)
    image: Optional[str] = None
    large_image: Optional[str] = None

    @field_validator("title", "description", "price")
    @classmethod
    def not_null(cls, value):
        # pola wymagane w bazie, mozna je pominac ale nie wyzerowac
        if value is None:
            raise ValueError("field cannot be null")
        return value


class ItemOut(BaseModel):
    id: int
    title: str
    description: str
    price: int
    image: Optional[str] = None
    large_image: Optional[str] = None
    user_id: int

    model_config = ConfigDict(from_attributes=True)


class ItemsConnection(BaseModel):
    count: int


class CartItemIn(BaseModel):
    item_id: int = Field(..., gt=0, description="ID produktu (musi byc > 0)")


class CartItemOut(BaseModel):
    id: int
    quantity: int
    item: Optional[ItemOut] = None

    model_config = ConfigDict(from_attributes=True)


class MeOut(UserRead):
    cart: List[CartItemOut] = []


class OrderCreate(BaseModel):
    """Schema dla zamowienia, token karty z frontendu."""

    token: str = Field(..., min_length=1)


class OrderItemOut(BaseModel):
    id: int
    title: str
    description: str
    price: int
    image: Optional[str] = None
    large_image: Optional[str] = None
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    id: int
    user_id: int
    total: int
    charge: str
    created_at: datetime
    items: List[OrderItemOut]

    model_config = ConfigDict(from_attributes=True)
