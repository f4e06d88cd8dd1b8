"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal
from unittest.mock import Mock

# Set test environment variables
os.environ.setdefault("CART_STORAGE_BACKEND", "memory")
os.environ.setdefault("PRODUCT_SERVICE_URL", "http://products.test")

from storefront_cart.domain.schemas import Product, Stock
from storefront_cart.repos.cart_repo import CartRepo, MemoryStore
from storefront_cart.services.cart_manager import CartManager
from storefront_cart.services.notification_service import ToastNotifier

CART_KEY = "@RocketShoes:cart"


def make_product(product_id: int, amount: int = 1) -> Product:
    return Product(
        id=product_id,
        title=f"Tênis {product_id}",
        price=Decimal("179.90"),
        image=f"https://cdn.test/tenis{product_id}.jpg",
        amount=amount,
    )


@pytest.fixture
def stock_levels():
    """product_id -> dostepna ilosc"""
    return {}


@pytest.fixture
def product_client(stock_levels):
    """Mock product-service client backed by stock_levels"""
    client = Mock()
    client.fetch_product.side_effect = lambda pid: make_product(pid).model_copy(
        update={"amount": 99}
    )
    client.fetch_stock.side_effect = lambda pid: Stock(id=pid, amount=stock_levels.get(pid, 0))
    return client


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def repo(store):
    return CartRepo(store, key=CART_KEY)


@pytest.fixture
def notifier():
    return ToastNotifier()


@pytest.fixture
def make_manager(repo, product_client, notifier):
    """Builds a CartManager, optionally with a pre-persisted cart"""

    def _make(items=None):
        if items is not None:
            repo.save(items)
        return CartManager(repo=repo, product_client=product_client, notifier=notifier)

    return _make
