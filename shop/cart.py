import logging

from .models import Product

logger = logging.getLogger(__name__)

CART_SESSION_KEY = 'cart'


class Cart:
    """
    Sitzungsbasierter Warenkorb.

    Gespeichert wird nur ``{product_id: quantity}`` in der Session; Produkte
    werden bei Bedarf aus der Datenbank geladen.
    """

    def __init__(self, request):
        self.session = request.session
        self._items = self.session.setdefault(CART_SESSION_KEY, {})

    def add(self, product, quantity=1):
        key = str(product.pk)
        self._items[key] = self._items.get(key, 0) + int(quantity)
        self._save()
        logger.debug("Cart: +%s × %s", quantity, product)

    def remove(self, product):
        if self._items.pop(str(product.pk), None) is not None:
            self._save()

    def clear(self):
        self._items.clear()
        self._save()

    def is_empty(self):
        return not self._items

    def items(self):
        """Liefert ``(product, quantity)``‑Paare; gelöschte Produkte fallen raus."""
        products = Product.objects.in_bulk([int(pk) for pk in self._items])
        return [
            (products[int(pk)], quantity)
            for pk, quantity in self._items.items()
            if int(pk) in products
        ]

    def products(self):
        return [product for product, _quantity in self.items()]

    def __len__(self):
        return sum(self._items.values())

    def _save(self):
        self.session[CART_SESSION_KEY] = self._items
        self.session.modified = True
