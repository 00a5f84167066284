import calendar
import logging
from datetime import datetime, timezone as dt_timezone

from django.utils.dateparse import parse_date, parse_datetime
from django.utils.dates import MONTHS
from django.utils.formats import date_format
from django.utils.translation import gettext as _

from .constants import (
    REQUIRES_BIRTH_DETAILS_PRODUCT_META,
    BIRTHDATETIME_ORDER_META,
    BIRTHPLACE_ORDER_META,
    TRUTHY_VALUES,
)

logger = logging.getLogger(__name__)


def get_number_options(start, end, placeholder=None, step=1):
    """
    Auswahl‑Optionen für ein Zahlen‑Dropdown.

    Liefert ``(value, label)``‑Paare von ``start`` bis ``end`` (inklusive);
    ist ``start > end``, wird rückwärts gezählt. Labels werden mit führenden
    Nullen auf die Länge der größeren Grenze aufgefüllt. Mit ``placeholder``
    steht zuerst eine leere Option ``('', placeholder)``.
    """
    step = abs(int(step)) or 1
    if start > end:
        step = -step
    width = len(str(max(start, end)))

    options = []
    if placeholder:
        options.append(('', placeholder))
    for number in range(start, end + (1 if step > 0 else -1), step):
        options.append((number, str(number).zfill(width)))
    return options


def get_birth_months(placeholder=None):
    """Die zwölf Monatsnamen in der aktiven Sprache als ``(1..12, name)``‑Paare."""
    months = []
    if placeholder:
        months.append(('', placeholder))
    months.extend((number, str(name)) for number, name in MONTHS.items())
    return months


def max_day(month, year):
    """Anzahl der Tage im Monat (gregorianischer Kalender)."""
    return calendar.monthrange(year, month)[1]


def product_requires_birth_details(product):
    """Ob für Bestellungen mit diesem Produkt Geburtsdaten erfasst werden."""
    if product is None:
        return False
    value = product.get_meta(REQUIRES_BIRTH_DETAILS_PRODUCT_META, default='')
    return str(value).strip().lower() in TRUTHY_VALUES


def cart_requires_birthday_details(products, options):
    """
    Ob der Warenkorb Geburtsdaten braucht: entweder immer (``show_always``)
    oder mindestens ein markiertes Produkt liegt im Warenkorb.
    """
    if options.show_always():
        return True
    return any(product_requires_birth_details(product) for product in products)


def order_requires_birthday_details(order, options):
    """Wie ``cart_requires_birthday_details``, aber für die Positionen einer Bestellung."""
    if options.show_always():
        return True
    if order is None or order.pk is None:
        return False
    items = order.items.select_related('product')
    return any(product_requires_birth_details(item.product) for item in items)


# ------------------------------------------------------------------
# Geburtszeitpunkt als Metadaten
# ------------------------------------------------------------------

def compose_birth_datetime(year=0, month=0, day=0, hour=0, minute=0):
    """
    Setzt Datum und Uhrzeit zu einem ISO‑String in UTC zusammen.

    Fehlende Bestandteile sind ``0`` – bei nur aktivierter Uhrzeit entsteht
    so z.B. ``0000-00-00T14:30:00+00:00``.
    """
    return (
        f"{year or 0:04d}-{month or 0:02d}-{day or 0:02d}"
        f"T{hour or 0:02d}:{minute or 0:02d}:00+00:00"
    )


def parse_birth_datetime(value):
    """
    ISO‑String (Datum+Uhrzeit oder nur Datum) → ``datetime`` in UTC.

    Liefert ``None`` für leere Werte und wirft ``ValueError`` bei allem, was
    sich nicht als gültiges Datum lesen lässt.
    """
    value = (value or '').strip()
    if not value:
        return None

    parsed = parse_datetime(value)
    if parsed is None:
        day = parse_date(value)
        if day is None:
            raise ValueError(f"{value!r} is not a date/time")
        parsed = datetime(day.year, day.month, day.day)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt_timezone.utc)
    return parsed


def get_birth_datetime(order):
    """Gespeicherter Geburtszeitpunkt einer Bestellung oder ``None``."""
    try:
        return parse_birth_datetime(order.get_meta(BIRTHDATETIME_ORDER_META))
    except ValueError:
        return None


def get_display_birth_datetime(order):
    """Geburtszeitpunkt für die Anzeige im Admin."""
    raw = order.get_meta(BIRTHDATETIME_ORDER_META)
    try:
        birth = parse_birth_datetime(raw)
    except ValueError:
        # z.B. nur Uhrzeit erfasst (Datum 0000-00-00): Rohwert anzeigen
        return raw
    if birth is None:
        return _("No date/time set")
    return date_format(birth, 'DATETIME_FORMAT')


def get_birth_place(order):
    return order.get_meta(BIRTHPLACE_ORDER_META)
