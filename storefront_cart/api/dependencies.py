# storefront_cart/api/dependencies.py
from fastapi import Request

from storefront_cart.repos.cart_repo import CartRepo, build_store
from storefront_cart.services.cart_manager import CartManager
from storefront_cart.services.notification_service import ToastNotifier
from storefront_cart.services.product_client import ProductClient


def build_cart_manager() -> CartManager:
    return CartManager(
        repo=CartRepo(build_store()),
        product_client=ProductClient(),
        notifier=ToastNotifier(),
    )


def get_cart_manager(request: Request) -> CartManager:
    #jeden CartManager na aplikacje, wstrzykiwany przez Depends
    return request.app.state.cart_manager
