# storefront_cart/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

PRODUCT_SERVICE_URL = os.getenv("PRODUCT_SERVICE_URL", "http://localhost:3333")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", 2))
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
CART_STORAGE_KEY = os.getenv("CART_STORAGE_KEY", "@RocketShoes:cart")
CART_STORAGE_BACKEND = os.getenv("CART_STORAGE_BACKEND", "file")
CART_STORAGE_PATH = os.getenv("CART_STORAGE_PATH", ".storage/local_storage.json")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
