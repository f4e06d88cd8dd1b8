# storefront_cart/services/cart_manager.py
from dataclasses import dataclass
from threading import Lock
from typing import List, Tuple

from storefront_cart.domain.errors import (
    ADD_ERROR,
    REMOVE_ERROR,
    UPDATE_ERROR,
    CartConflictError,
    CartError,
    InvalidQuantityError,
    OutOfStockError,
    ProductNotInCartError,
)
from storefront_cart.domain.schemas import Product
from storefront_cart.repos.cart_repo import CartRepo
from storefront_cart.services.notification_service import Notifier
from storefront_cart.services.product_client import ProductClient
from storefront_cart.utils.retry import conflict_retry
from storefront_cart.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CartSnapshot:
    version: int
    items: Tuple[Product, ...]

    def find(self, product_id: int) -> Product | None:
        return next((p for p in self.items if p.id == product_id), None)


class CartManager:
    """
    Stan koszyka po stronie klienta, wstrzykiwany do warstwy UI.

    Operacje (add, remove, update) nigdy nie rzucaja wyjatkow na zewnatrz:
    kazdy blad konczy sie powiadomieniem (toast) i brakiem zmiany stanu.
    Zwracaja True gdy zmiana zostala zapisana.

    Wspolbieznosc: operacja czyta wersjonowany snapshot, robi zapytania HTTP
    bez locka, a zapis robi compare-and-swap na wersji. Konflikt wersji =
    powtorzenie operacji na swiezym snapshocie.
    """

    def __init__(
        self,
        repo: CartRepo,
        product_client: ProductClient,
        notifier: Notifier,
    ):
        self.repo = repo
        self.product_client = product_client
        self.notifier = notifier

        self._lock = Lock()
        self._version = 0
        self._items: Tuple[Product, ...] = tuple(repo.load())

    #query
    @property
    def cart(self) -> List[Product]:
        return list(self._items)

    @property
    def version(self) -> int:
        return self._version

    def snapshot(self) -> CartSnapshot:
        with self._lock:
            return CartSnapshot(version=self._version, items=self._items)

    #commands
    def add_product(self, product_id: int) -> bool:
        return self._run(ADD_ERROR, self._add_product, product_id)

    def remove_product(self, product_id: int) -> bool:
        return self._run(REMOVE_ERROR, self._remove_product, product_id)

    def update_product_amount(self, product_id: int, amount: int) -> bool:
        return self._run(UPDATE_ERROR, self._update_product_amount, product_id, amount)

    def _run(self, generic_message: str, operation, *args) -> bool:
        try:
            operation(*args)
            return True
        except CartError as e:
            logger.warning(f"Operacja {operation.__name__}{args} odrzucona: {e.message}")
            self.notifier.error(e.message)
        except Exception as e:
            logger.error(f"Blad podczas {operation.__name__}{args}: {e}")
            self.notifier.error(generic_message)
        return False

    @conflict_retry()
    def _add_product(self, product_id: int) -> None:
        snap = self.snapshot()
        found = snap.find(product_id)

        if found is None:
            logger.info(f"Pobieranie danych produktu {product_id} z product-service")
            product = self.product_client.fetch_product(product_id)
            stock = self.product_client.fetch_stock(product.id)

            if stock.amount <= 0:
                raise OutOfStockError()

            updated = snap.items + (product.model_copy(update={"amount": 1}),)
            self._commit(snap, updated)
            logger.info(f"Dodano nowy produkt {product.id} do koszyka")
            return

        stock = self.product_client.fetch_stock(found.id)

        if found.amount + 1 > stock.amount:
            raise OutOfStockError()

        updated = tuple(
            p.model_copy(update={"amount": p.amount + 1}) if p.id == found.id else p
            for p in snap.items
        )
        self._commit(snap, updated)
        logger.info(
            f"Produkt {found.id} juz jest w koszyku, zwiekszam ilosc "
            f"z {found.amount} do {found.amount + 1}"
        )

    @conflict_retry()
    def _remove_product(self, product_id: int) -> None:
        snap = self.snapshot()

        if snap.find(product_id) is None:
            raise ProductNotInCartError(REMOVE_ERROR)

        updated = tuple(p for p in snap.items if p.id != product_id)
        self._commit(snap, updated)
        logger.info(f"Produkt {product_id} usuniety z koszyka")

    @conflict_retry()
    def _update_product_amount(self, product_id: int, amount: int) -> None:
        snap = self.snapshot()
        found = snap.find(product_id)

        if amount <= 0 or found is None or found.amount <= 0:
            raise InvalidQuantityError()

        stock = self.product_client.fetch_stock(product_id)

        #ilosc absolutna, nie przyrost
        if amount > stock.amount:
            raise OutOfStockError()

        updated = tuple(
            p.model_copy(update={"amount": amount}) if p.id == product_id else p
            for p in snap.items
        )
        self._commit(snap, updated)
        logger.info(f"Produkt {product_id}: ilosc z {found.amount} na {amount}")

    def _commit(self, snap: CartSnapshot, items: Tuple[Product, ...]) -> None:
        with self._lock:
            # Optimistic locking, warunek na wersje snapshotu
            if self._version != snap.version:
                raise CartConflictError(
                    f"Koszyk zmieniony w trakcie operacji "
                    f"(wersja {snap.version} -> {self._version})"
                )

            #najpierw storage, potem pamiec - blad zapisu nie zmienia stanu
            self.repo.save(list(items))
            self._items = items
            self._version += 1
