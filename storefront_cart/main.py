# storefront_cart/main.py
import uvicorn

from storefront_cart.api import create_app
from storefront_cart.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info("Starting storefront cart on :8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)
