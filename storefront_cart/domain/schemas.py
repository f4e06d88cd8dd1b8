# storefront_cart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal


class Product(BaseModel):
    """Pozycja koszyka - dane produktu z product-service plus ilosc."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: int
    title: str = ""
    price: Decimal = Decimal("0.00")
    image: str = ""
    amount: int = 1


class Stock(BaseModel):
    """Stan magazynowy produktu (tylko odczyt)."""

    id: int
    amount: int


class UpdateProductAmount(BaseModel):
    product_id: int
    amount: int


class AddProductIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    items: List[Product]
    version: int


class NotificationsOut(BaseModel):
    messages: List[str]


class PersistedCart(BaseModel):
    """Wersjonowana koperta zapisu koszyka w local storage."""

    version: int
    items: List[Product]
