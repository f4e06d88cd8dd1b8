"""Tests for cart persistence"""
import json
import pytest
import redis
from unittest.mock import Mock

from storefront_cart.domain.errors import CartDecodeError
from storefront_cart.repos.cart_repo import (
    CART_FORMAT_VERSION,
    CartRepo,
    FileStore,
    MemoryStore,
    RedisStore,
    build_store,
    decode_cart,
    encode_cart,
)

from conftest import CART_KEY, make_product


class TestCodec:
    def test_encode_writes_versioned_envelope(self):
        raw = json.loads(encode_cart([make_product(1, 2)]))

        assert raw["version"] == CART_FORMAT_VERSION
        assert raw["items"][0]["id"] == 1
        assert raw["items"][0]["amount"] == 2

    def test_decode_restores_products(self):
        items = [make_product(1, 2), make_product(7, 1)]
        assert decode_cart(encode_cart(items)) == items

    def test_decode_keeps_extra_product_attributes(self):
        text = json.dumps({"version": 1, "items": [
            {"id": 1, "title": "Tênis", "price": 10, "image": "x.jpg", "amount": 1, "brand": "Nike"},
        ]})

        product = decode_cart(text)[0]
        assert product.model_extra == {"brand": "Nike"}

    def test_decode_legacy_bare_list(self):
        text = json.dumps([{"id": 3, "title": "Tênis", "price": 139.9, "image": "y.jpg", "amount": 2}])

        items = decode_cart(text)
        assert [(p.id, p.amount) for p in items] == [(3, 2)]

    @pytest.mark.parametrize("text", [
        "{broken",
        '"just a string"',
        '{"version": 99, "items": []}',
        '{"items": []}',
        '{"version": 1, "items": [{"title": "no id"}]}',
        '{"version": 1, "items": [{"id": 1}, {"id": 1}]}',
    ])
    def test_decode_rejects_bad_payloads(self, text):
        with pytest.raises(CartDecodeError):
            decode_cart(text)


class TestCartRepo:
    def test_load_missing_key(self):
        assert CartRepo(MemoryStore(), key=CART_KEY).load() == []

    def test_save_overwrites_full_cart(self):
        store = MemoryStore()
        repo = CartRepo(store, key=CART_KEY)

        repo.save([make_product(1), make_product(2)])
        repo.save([make_product(2, 3)])

        assert [(p.id, p.amount) for p in repo.load()] == [(2, 3)]
        assert list(store.data) == [CART_KEY]

    def test_load_corrupted_snapshot_returns_empty(self):
        store = MemoryStore({CART_KEY: "[{]"})
        assert CartRepo(store, key=CART_KEY).load() == []

    def test_load_store_unavailable_returns_empty(self):
        store = Mock()
        store.get.side_effect = redis.ConnectionError("refused")
        assert CartRepo(store, key=CART_KEY).load() == []

    def test_default_key(self):
        assert CartRepo(MemoryStore()).key == CART_KEY


class TestFileStore:
    def test_roundtrip_and_other_keys_preserved(self, tmp_path):
        path = tmp_path / "nested" / "local_storage.json"
        store = FileStore(path)

        store.set("other", "value")
        store.set(CART_KEY, "cart")

        assert FileStore(path).get(CART_KEY) == "cart"
        assert FileStore(path).get("other") == "value"
        assert list(path.parent.glob("*.tmp")) == []

    @pytest.mark.parametrize("content", ["", "not json", "[1, 2]"])
    def test_unreadable_file_reads_empty(self, tmp_path, content):
        path = tmp_path / "local_storage.json"
        path.write_text(content, encoding="utf-8")

        assert FileStore(path).get(CART_KEY) is None

    def test_missing_file(self, tmp_path):
        assert FileStore(tmp_path / "nope.json").get(CART_KEY) is None


class TestRedisStore:
    def test_get_and_set_delegate_to_client(self):
        client = Mock()
        client.get.return_value = "cart"
        store = RedisStore(client=client)

        store.set(CART_KEY, "cart")

        client.set.assert_called_once_with(CART_KEY, "cart")
        assert store.get(CART_KEY) == "cart"

    def test_transient_error_is_retried(self, monkeypatch):
        client = Mock()
        client.get.side_effect = [redis.ConnectionError("blip"), "cart"]
        store = RedisStore(client=client)
        monkeypatch.setattr(RedisStore.get.retry, "sleep", lambda _: None)

        assert store.get(CART_KEY) == "cart"
        assert client.get.call_count == 2


class TestBuildStore:
    def test_memory_backend(self):
        assert isinstance(build_store("memory"), MemoryStore)

    def test_file_backend(self):
        assert isinstance(build_store("file"), FileStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_store("s3")
