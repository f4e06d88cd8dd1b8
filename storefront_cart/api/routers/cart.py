# storefront_cart/api/routers/cart.py
from fastapi import APIRouter, Depends

from storefront_cart.api.dependencies import get_cart_manager
from storefront_cart.domain.schemas import (
    AddProductIn,
    CartOut,
    NotificationsOut,
    UpdateProductAmount,
)
from storefront_cart.services.cart_manager import CartManager

router = APIRouter(tags=["cart"])

# Bledy koszyka nie sa bledami HTTP - zwracamy niezmieniony koszyk,
# a komunikat UI odbiera z /notifications


def _cart_out(manager: CartManager) -> CartOut:
    snap = manager.snapshot()
    return CartOut(items=list(snap.items), version=snap.version)


@router.get("/cart", response_model=CartOut)
def get_cart(manager: CartManager = Depends(get_cart_manager)):
    return _cart_out(manager)


@router.post("/cart/items", response_model=CartOut)
def add_item(payload: AddProductIn, manager: CartManager = Depends(get_cart_manager)):
    manager.add_product(payload.product_id)
    return _cart_out(manager)


@router.delete("/cart/items/{product_id}", response_model=CartOut)
def remove_item(product_id: int, manager: CartManager = Depends(get_cart_manager)):
    manager.remove_product(product_id)
    return _cart_out(manager)


@router.put("/cart/items", response_model=CartOut)
def update_item_amount(
    payload: UpdateProductAmount,
    manager: CartManager = Depends(get_cart_manager),
):
    manager.update_product_amount(payload.product_id, payload.amount)
    return _cart_out(manager)


@router.get("/notifications", response_model=NotificationsOut)
def drain_notifications(manager: CartManager = Depends(get_cart_manager)):
    drain = getattr(manager.notifier, "drain", None)
    return NotificationsOut(messages=drain() if drain else [])
