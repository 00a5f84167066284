import logging

from .constants import (
    BIRTHDATETIME_ORDER_META,
    BIRTHPLACE_ORDER_META,
    BIRTH_DAY_FIELD_ID,
    BIRTH_MONTH_FIELD_ID,
    BIRTH_YEAR_FIELD_ID,
    BIRTH_HOUR_FIELD_ID,
    BIRTH_MINUTE_FIELD_ID,
    BIRTH_PLACE_FIELD_ID,
    DATE_FIELD_IDS,
    TIME_FIELD_IDS,
)
from .options import field_options
from .utils import compose_birth_datetime, order_requires_birthday_details

logger = logging.getLogger(__name__)


def save_birthday_details(order, data, options=None):
    """
    Speichert geprüfte Checkout‑Werte als Metadaten der Bestellung.

    ``data`` sind die ``cleaned_data`` des ``BirthdayCheckoutForm`` (ints
    bzw. ``None`` für leere optionale Felder). Datum und Uhrzeit werden zu
    einem einzigen Zeitpunkt zusammengesetzt; fehlende Bestandteile sind 0.
    Gibt ``True`` zurück, wenn etwas geschrieben wurde.
    """
    options = options if options is not None else field_options()
    if not order_requires_birthday_details(order, options):
        return False

    written = False

    if options.place_enabled():
        place = (data.get(BIRTH_PLACE_FIELD_ID) or '').strip()
        if place:
            order.update_meta(BIRTHPLACE_ORDER_META, place)
            written = True

    fields = ()
    if options.date_enabled():
        fields += DATE_FIELD_IDS
    if options.time_enabled():
        fields += TIME_FIELD_IDS

    components = {name: data.get(name) for name in fields}
    # Alle (optionalen) Felder leer → kein Zeitpunkt speichern
    if any(value is not None for value in components.values()):
        order.update_meta(BIRTHDATETIME_ORDER_META, compose_birth_datetime(
            year=components.get(BIRTH_YEAR_FIELD_ID),
            month=components.get(BIRTH_MONTH_FIELD_ID),
            day=components.get(BIRTH_DAY_FIELD_ID),
            hour=components.get(BIRTH_HOUR_FIELD_ID),
            minute=components.get(BIRTH_MINUTE_FIELD_ID),
        ))
        written = True

    if written:
        logger.info("Saved birthday details for order %s.", order.pk)
    return written
