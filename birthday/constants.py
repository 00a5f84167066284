"""
Gemeinsame Konstanten für Checkout, Admin und Einstellungen.

Die Feld‑IDs sind gleichzeitig die ``name``‑Attribute der HTML‑Felder.
Metadaten‑Schlüssel mit führendem Unterstrich gelten als geschützt und
werden in den freien Meta‑Inlines des Admins nicht angezeigt.
"""

# ------------------------------------------------------------------
# Einstellungen (ein PlatformSetting‑Eintrag mit JSON‑Objekt)
# ------------------------------------------------------------------
FIELD_OPTIONS = 'obf_field_options'

FIELD_DISABLED = 0
FIELD_OPTIONAL = 1
FIELD_REQUIRED = 2
FIELD_STATES = (FIELD_DISABLED, FIELD_OPTIONAL, FIELD_REQUIRED)

DATE_ENABLED_KEY = 'gcobf_date_enabled'
TIME_ENABLED_KEY = 'gcobf_time_enabled'
PLACE_ENABLED_KEY = 'gcobf_place_enabled'
DATE_AS_SELECT_KEY = 'gcobf_date_select'
TIME_AS_SELECT_KEY = 'gcobf_time_select'
SHOW_ALWAYS_KEY = 'gcobf_show_always'

ENABLED_KEYS = (DATE_ENABLED_KEY, TIME_ENABLED_KEY, PLACE_ENABLED_KEY)
BOOLEAN_KEYS = (DATE_AS_SELECT_KEY, TIME_AS_SELECT_KEY, SHOW_ALWAYS_KEY)

DEFAULT_FIELD_OPTIONS = {
    DATE_ENABLED_KEY: FIELD_DISABLED,
    TIME_ENABLED_KEY: FIELD_DISABLED,
    PLACE_ENABLED_KEY: FIELD_DISABLED,
    DATE_AS_SELECT_KEY: False,
    TIME_AS_SELECT_KEY: False,
    SHOW_ALWAYS_KEY: False,
}

# ------------------------------------------------------------------
# Bestellung
# ------------------------------------------------------------------
MIN_YEAR = 1900
MAX_YEAR = 2200

BIRTHPLACE_ORDER_META = '_gcobf_birthplace'
BIRTHDATETIME_ORDER_META = '_gcobf_birthdate'

BIRTH_DAY_FIELD_ID = 'gcobf_birthday'
BIRTH_MONTH_FIELD_ID = 'gcobf_birthmonth'
BIRTH_YEAR_FIELD_ID = 'gcobf_birthyear'
BIRTH_HOUR_FIELD_ID = 'gcobf_birthhour'
BIRTH_MINUTE_FIELD_ID = 'gcobf_birthmin'
BIRTH_PLACE_FIELD_ID = 'gcobf_birthplace'

DATE_FIELD_IDS = (BIRTH_DAY_FIELD_ID, BIRTH_MONTH_FIELD_ID, BIRTH_YEAR_FIELD_ID)
TIME_FIELD_IDS = (BIRTH_HOUR_FIELD_ID, BIRTH_MINUTE_FIELD_ID)

# ------------------------------------------------------------------
# Produkt
# ------------------------------------------------------------------
REQUIRES_BIRTH_DETAILS_FIELD_ID = 'gcobf_birth_details_required'
REQUIRES_BIRTH_DETAILS_PRODUCT_META = 'gcobf_requires_birth_details'

TRUTHY_VALUES = ('1', 'true', 'yes', 'on')
FALSY_VALUES = ('0', 'false', 'no', 'off', '')
