"""
Zugriff auf die Geburtsdaten‑Einstellungen.

Alle Optionen liegen als ein JSON‑Objekt in ``config.PlatformSetting`` unter
``FIELD_OPTIONS``. Fehlende Schlüssel verhalten sich wie „deaktiviert“ bzw.
``False``.
"""
import logging

from config.models import PlatformSetting
from config.utils import get_app_setting, set_app_setting

from .constants import (
    FIELD_OPTIONS,
    FIELD_OPTIONAL,
    FIELD_REQUIRED,
    FIELD_STATES,
    DATE_ENABLED_KEY,
    TIME_ENABLED_KEY,
    PLACE_ENABLED_KEY,
    DATE_AS_SELECT_KEY,
    TIME_AS_SELECT_KEY,
    SHOW_ALWAYS_KEY,
    ENABLED_KEYS,
    BOOLEAN_KEYS,
    DEFAULT_FIELD_OPTIONS,
    TRUTHY_VALUES,
    FALSY_VALUES,
)

logger = logging.getLogger(__name__)


def parse_field_state(value):
    """``0``/``1``/``2`` (int oder String) → int, alles andere → ``None``."""
    if isinstance(value, bool):
        return None
    try:
        state = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return state if state in FIELD_STATES else None


def parse_flag(value):
    """Bekannte Wahr/Falsch‑Werte → bool, alles andere → ``None``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value) if value in (0, 1) else None
    if not isinstance(value, str):
        return None
    token = value.strip().lower()
    if token in TRUTHY_VALUES:
        return True
    if token in FALSY_VALUES:
        return False
    return None


def validate_field_settings(submitted, current=None):
    """
    Prüft eingereichte Einstellungen und führt sie mit den gespeicherten zusammen.

    Nur bekannte Schlüssel mit gültigen Werten werden übernommen; unbekannte
    Schlüssel und ungültige Werte werden stillschweigend ignoriert, so dass
    der bisherige Wert erhalten bleibt.
    """
    validated = dict(current or {})
    submitted = submitted or {}

    for key in ENABLED_KEYS:
        if key not in submitted:
            continue
        state = parse_field_state(submitted[key])
        if state is None:
            logger.debug("Ignoring invalid value %r for %s.", submitted[key], key)
            continue
        validated[key] = state

    for key in BOOLEAN_KEYS:
        if key not in submitted:
            continue
        flag = parse_flag(submitted[key])
        if flag is None:
            logger.debug("Ignoring invalid value %r for %s.", submitted[key], key)
            continue
        validated[key] = flag

    return validated


class FieldOptions:
    """Lesezugriff auf die Einstellungen; ein Objekt pro Request genügt."""

    def __init__(self, values=None):
        self.values = dict(values or {})

    @classmethod
    def load(cls):
        values = get_app_setting(FIELD_OPTIONS, default=None, cast_type=dict)
        if values is None:
            # Erster Zugriff: Eintrag mit Standardwerten anlegen
            if not PlatformSetting.objects.filter(key=FIELD_OPTIONS).exists():
                set_app_setting(
                    FIELD_OPTIONS, DEFAULT_FIELD_OPTIONS,
                    description="Birthday fields: enabled/required state and input types",
                )
                logger.info("Created default birthday field options.")
            values = dict(DEFAULT_FIELD_OPTIONS)
        return cls(values)

    def update(self, submitted):
        """Übernimmt gültige Werte aus ``submitted`` und speichert alles."""
        self.values = validate_field_settings(submitted, self.values)
        set_app_setting(FIELD_OPTIONS, self.values)
        logger.info("Birthday field options saved: %s", self.values)
        return self.values

    # ---- Rohwerte -------------------------------------------------------

    def state_for(self, key):
        """Tri‑State‑Wert eines Schlüssels oder ``None``, wenn nicht (gültig) gesetzt."""
        return parse_field_state(self.values.get(key))

    def flag_for(self, key):
        """Wahr/Falsch‑Wert eines Schlüssels oder ``None``, wenn nicht (gültig) gesetzt."""
        return parse_flag(self.values.get(key))

    def _flag(self, key):
        return bool(self.flag_for(key))

    def get_date_option(self):
        return self.state_for(DATE_ENABLED_KEY)

    def get_time_option(self):
        return self.state_for(TIME_ENABLED_KEY)

    def get_place_option(self):
        return self.state_for(PLACE_ENABLED_KEY)

    # ---- Datum ----------------------------------------------------------

    def date_enabled(self):
        return self.get_date_option() in (FIELD_OPTIONAL, FIELD_REQUIRED)

    def date_required(self):
        return self.get_date_option() == FIELD_REQUIRED

    def date_as_select(self):
        return self._flag(DATE_AS_SELECT_KEY)

    # ---- Uhrzeit --------------------------------------------------------

    def time_enabled(self):
        return self.get_time_option() in (FIELD_OPTIONAL, FIELD_REQUIRED)

    def time_required(self):
        return self.get_time_option() == FIELD_REQUIRED

    def time_as_select(self):
        return self._flag(TIME_AS_SELECT_KEY)

    # ---- Ort ------------------------------------------------------------

    def place_enabled(self):
        return self.get_place_option() in (FIELD_OPTIONAL, FIELD_REQUIRED)

    def place_required(self):
        return self.get_place_option() == FIELD_REQUIRED

    # ---- Anzeige --------------------------------------------------------

    def show_always(self):
        return self._flag(SHOW_ALWAYS_KEY)

    def any_enabled(self):
        return self.date_enabled() or self.time_enabled() or self.place_enabled()

    def __repr__(self):
        return f"FieldOptions({self.values!r})"


def field_options():
    """Aktuelle Einstellungen (über den Cache von ``get_app_setting``)."""
    return FieldOptions.load()
