# storefront_cart/domain/errors.py

# Komunikaty widoczne dla uzytkownika (toast), stale per przypadek
ADD_ERROR = "Erro na adição do produto"
REMOVE_ERROR = "Erro na remoção do produto"
UPDATE_ERROR = "Erro na alteração de quantidade do produto"
OUT_OF_STOCK = "Quantidade solicitada fora de estoque"


class CartError(Exception):
    """
    Bazowy blad domeny koszyka.
    Zawsze niesie gotowy komunikat dla uzytkownika.
    """

    message = ""

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ProductNotInCartError(CartError):
    """Produktu nie ma w koszyku (remove, update)."""

    message = REMOVE_ERROR


class InvalidQuantityError(CartError):
    """Ilosc <= 0 albo zapisana ilosc jest juz niedodatnia."""

    message = UPDATE_ERROR


class OutOfStockError(CartError):
    """Zadana ilosc przekracza stan magazynowy."""

    message = OUT_OF_STOCK


class CartConflictError(RuntimeError):
    """Snapshot koszyka zostal zmieniony przez inna operacje (compare-and-swap)."""


class CartDecodeError(ValueError):
    """Zapisany koszyk nie daje sie odczytac."""
