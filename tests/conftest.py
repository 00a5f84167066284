"""Fixtures for the birthday details tests.

Provides field option builders, products (flagged and unflagged), orders
with line items and a session cart stand-in.
"""
from decimal import Decimal

import pytest
from django.core.cache import cache

from birthday.constants import (
    DATE_ENABLED_KEY,
    TIME_ENABLED_KEY,
    PLACE_ENABLED_KEY,
    DATE_AS_SELECT_KEY,
    TIME_AS_SELECT_KEY,
    SHOW_ALWAYS_KEY,
    FIELD_DISABLED,
    REQUIRES_BIRTH_DETAILS_PRODUCT_META,
)
from birthday.options import FieldOptions
from shop.models import Product, Order, OrderItem


def make_options(date=FIELD_DISABLED, time=FIELD_DISABLED, place=FIELD_DISABLED,
                 date_select=False, time_select=False, show_always=True):
    """Build a FieldOptions value object without touching the database."""
    return FieldOptions({
        DATE_ENABLED_KEY: date,
        TIME_ENABLED_KEY: time,
        PLACE_ENABLED_KEY: place,
        DATE_AS_SELECT_KEY: date_select,
        TIME_AS_SELECT_KEY: time_select,
        SHOW_ALWAYS_KEY: show_always,
    })


def store_options(**kwargs):
    """Persist options the same way the settings page does."""
    options = make_options(**kwargs)
    FieldOptions.load().update(options.values)
    return FieldOptions.load()


class FakeCart:
    """Minimal cart exposing ``products()`` like ``shop.cart.Cart``."""

    def __init__(self, products):
        self._products = list(products)

    def products(self):
        return list(self._products)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def product(db):
    return Product.objects.create(name="Greeting card", sku="CARD-1", price=Decimal("4.50"))


@pytest.fixture
def flagged_product(db):
    chart = Product.objects.create(name="Natal chart", sku="CHART-1", price=Decimal("25.00"))
    chart.update_meta(REQUIRES_BIRTH_DETAILS_PRODUCT_META, "yes")
    return chart


@pytest.fixture
def make_order(db):
    """Factory: ``make_order(*products)`` creates an order with one line per product."""
    def _make(*products):
        order = Order.objects.create(customer_name="Ada Lovelace", customer_email="ada@example.com")
        for item_product in products:
            OrderItem.objects.create(
                order=order,
                product=item_product,
                name=item_product.name,
                quantity=1,
                unit_price=item_product.price,
            )
        return order
    return _make
