# storefront_cart/services/product_client.py
import requests

from storefront_cart.domain.schemas import Product, Stock
from storefront_cart.utils.retry import http_retry
from storefront_cart.utils.settings import PRODUCT_SERVICE_URL, HTTP_TIMEOUT
from storefront_cart.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else HTTP_TIMEOUT

    def _get(self, path: str) -> dict:
        url = f"{self.base_url}/{path}"
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def fetch_product(self, product_id: int) -> Product:
        return Product.model_validate(self._get(f"products/{product_id}"))

    @http_retry()
    def fetch_stock(self, product_id: int) -> Stock:
        return Stock.model_validate(self._get(f"stock/{product_id}"))
