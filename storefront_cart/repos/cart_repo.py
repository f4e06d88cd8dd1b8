# storefront_cart/repos/cart_repo.py
import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

import redis
from pydantic import ValidationError

from storefront_cart.domain.errors import CartDecodeError
from storefront_cart.domain.schemas import PersistedCart, Product
from storefront_cart.utils import settings
from storefront_cart.utils.retry import redis_retry
from storefront_cart.utils.logging import get_logger

logger = get_logger(__name__)

#aktualna wersja formatu zapisu, 0 = stary format (goly json list)
CART_FORMAT_VERSION = 1


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, data: dict[str, str] | None = None):
        self.data = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class FileStore:
    """
    Lokalny key-value store w pliku JSON (odpowiednik localStorage).
    Brak pliku / pusty / uszkodzony plik = pusty store.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8").strip()
            if text == "":
                return {}
            data = json.loads(text)
        except (OSError, ValueError) as e:
            logger.warning(f"Nie mozna odczytac {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        #zapis atomowy: tmp + replace, zeby nie zostawic polowy pliku
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except Exception:
            Path(tmp).unlink(missing_ok=True)
            raise


class RedisStore:
    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or settings.REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def get(self, key: str) -> str | None:
        return self.redis.get(key)

    @redis_retry()
    def set(self, key: str, value: str) -> None:
        self.redis.set(key, value)


def build_store(backend: str | None = None) -> KeyValueStore:
    backend = (backend or settings.CART_STORAGE_BACKEND).lower()

    if backend == "file":
        return FileStore(settings.CART_STORAGE_PATH)
    if backend == "redis":
        return RedisStore()
    if backend == "memory":
        return MemoryStore()

    raise ValueError(f"Nieznany backend storage: {backend}")


def encode_cart(items: list[Product]) -> str:
    envelope = PersistedCart(version=CART_FORMAT_VERSION, items=list(items))
    return envelope.model_dump_json()


def decode_cart(text: str) -> list[Product]:
    try:
        raw = json.loads(text)
    except ValueError as e:
        raise CartDecodeError(f"Niepoprawny JSON koszyka: {e}") from e

    #stary format - sama lista produktow
    if isinstance(raw, list):
        raw = {"version": 0, "items": raw}

    if not isinstance(raw, dict):
        raise CartDecodeError("Nieznany format koszyka")

    version = raw.get("version")
    if version not in (0, CART_FORMAT_VERSION):
        raise CartDecodeError(f"Nieobslugiwana wersja koszyka: {version}")

    try:
        envelope = PersistedCart.model_validate(raw)
    except ValidationError as e:
        raise CartDecodeError(f"Niepoprawne pozycje koszyka: {e}") from e

    ids = [p.id for p in envelope.items]
    if len(ids) != len(set(ids)):
        raise CartDecodeError("Zduplikowane produkty w koszyku")

    return envelope.items


class CartRepo:
    def __init__(self, store: KeyValueStore, key: str | None = None):
        self.store = store
        self.key = key or settings.CART_STORAGE_KEY

    def load(self) -> list[Product]:
        try:
            text = self.store.get(self.key)
        except redis.RedisError as e:
            logger.warning(f"Storage niedostepny przy odczycie {self.key}: {e}")
            return []

        if not text:
            return []

        try:
            items = decode_cart(text)
        except CartDecodeError as e:
            logger.warning(f"Zapisany koszyk {self.key} nieczytelny, start z pustym: {e}")
            return []

        logger.info(f"Wczytano koszyk {self.key} ({len(items)} pozycji)")
        return items

    def save(self, items: list[Product]) -> None:
        self.store.set(self.key, encode_cart(items))
