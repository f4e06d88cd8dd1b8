# storefront_cart/api/__init__.py
from fastapi import FastAPI

from storefront_cart.api.dependencies import build_cart_manager
from storefront_cart.api.routers import cart
from storefront_cart.api.routers.health import router as health_router
from storefront_cart.services.cart_manager import CartManager


def create_app(manager: CartManager | None = None) -> FastAPI:
    app = FastAPI(title="Storefront Cart", version="1.0.0")
    app.state.cart_manager = manager or build_cart_manager()
    app.include_router(health_router)
    app.include_router(cart.router)
    return app
