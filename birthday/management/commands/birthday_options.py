"""
Django‑Management‑Command zum Anzeigen und Setzen der Geburtsdaten‑Optionen.

Ohne Argumente werden die aktuellen Optionen ausgegeben. Mit Argumenten
werden die Werte über ``validate_field_settings`` übernommen, also genauso
wie über die Einstellungsseite:

    ./manage.py birthday_options --date required --time optional --place disabled
    ./manage.py birthday_options --date-select yes --show-always no
"""
from django.core.management.base import BaseCommand

from birthday.constants import (
    FIELD_DISABLED,
    FIELD_OPTIONAL,
    FIELD_REQUIRED,
    DATE_ENABLED_KEY,
    TIME_ENABLED_KEY,
    PLACE_ENABLED_KEY,
    DATE_AS_SELECT_KEY,
    TIME_AS_SELECT_KEY,
    SHOW_ALWAYS_KEY,
)
from birthday.options import field_options

STATE_NAMES = {
    'disabled': FIELD_DISABLED,
    'optional': FIELD_OPTIONAL,
    'required': FIELD_REQUIRED,
}
STATE_LABELS = {value: name for name, value in STATE_NAMES.items()}

# (Option, Schlüssel, Art)
ARGUMENTS = (
    ('--date', DATE_ENABLED_KEY, 'state'),
    ('--time', TIME_ENABLED_KEY, 'state'),
    ('--place', PLACE_ENABLED_KEY, 'state'),
    ('--date-select', DATE_AS_SELECT_KEY, 'flag'),
    ('--time-select', TIME_AS_SELECT_KEY, 'flag'),
    ('--show-always', SHOW_ALWAYS_KEY, 'flag'),
)


class Command(BaseCommand):
    help = "Shows or updates which birthday fields are shown, required and how they are rendered"

    def add_arguments(self, parser):
        for option, key, kind in ARGUMENTS:
            if kind == 'state':
                parser.add_argument(option, dest=key, choices=sorted(STATE_NAMES))
            else:
                parser.add_argument(option, dest=key, choices=('yes', 'no'))

    def handle(self, *args, **options):
        current = field_options()

        submitted = {}
        for _option, key, kind in ARGUMENTS:
            value = options.get(key)
            if value is None:
                continue
            submitted[key] = STATE_NAMES[value] if kind == 'state' else value

        if submitted:
            current.update(submitted)
            self.stdout.write(self.style.SUCCESS("Birthday field options updated."))

        for option, key, kind in ARGUMENTS:
            if kind == 'state':
                state = current.state_for(key)
                shown = STATE_LABELS.get(state, 'unset')
            else:
                flag = current.flag_for(key)
                shown = 'unset' if flag is None else ('yes' if flag else 'no')
            self.stdout.write(f"{option[2:]:<12} {shown}")
