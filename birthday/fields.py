from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _


def _to_int(value):
    """'7', ' 7 ', '7.9' → 7; alles Nicht‑Numerische → ValueError."""
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(float(text))
    except OverflowError as exc:
        raise ValueError(text) from exc


def validate_number(value, required, title, min_value=None, max_value=None):
    """
    Prüft einen eingereichten Zahlenwert.

    * leer + Pflichtfeld → ValidationError
    * leer + optional    → ``None`` („kein Wert“)
    * nicht numerisch    → ValidationError
    * außerhalb min/max  → ValidationError mit der/den Grenze(n) im Text
    * sonst              → der Wert als ``int``
    """
    if value is None or str(value).strip() == '':
        if required:
            raise ValidationError(
                _('Please enter your %(title)s'),
                code='required',
                params={'title': title},
            )
        return None

    try:
        number = _to_int(value)
    except ValueError:
        raise ValidationError(
            _("'%(value)s' is not a valid %(title)s"),
            code='invalid',
            params={'value': value, 'title': title},
        )

    params = {'value': number, 'title': title, 'min': min_value, 'max': max_value}
    if min_value is not None and max_value is not None:
        if number < min_value or number > max_value:
            raise ValidationError(
                _("'%(value)s' is not a valid %(title)s - must be between %(min)s and %(max)s"),
                code='out_of_range',
                params=params,
            )
    elif min_value is not None:
        if number < min_value:
            raise ValidationError(
                _("'%(value)s' is not a valid %(title)s - must be %(min)s or greater"),
                code='min_value',
                params=params,
            )
    elif max_value is not None:
        if number > max_value:
            raise ValidationError(
                _("'%(value)s' is not a valid %(title)s - must be %(max)s or less"),
                code='max_value',
                params=params,
            )

    return number


class BirthNumberField(forms.Field):
    """
    Zahlenfeld für Tag/Monat/Jahr/Stunde/Minute.

    Das Widget (NumberInput oder Select) bestimmt nur die Darstellung; die
    Prüfung übernimmt ``validate_number`` mit den Grenzen dieses Feldes.
    """

    def __init__(self, *, title, min_value=None, max_value=None, **kwargs):
        self.title = title
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(**kwargs)

    def clean(self, value):
        value = validate_number(value, self.required, self.title, self.min_value, self.max_value)
        self.run_validators(value)
        return value


class SettingChoiceField(forms.ChoiceField):
    """
    ChoiceField für die Einstellungsseite, das nie einen Fehler meldet:
    leere oder unbekannte Werte werden zu ``None`` und damit später ignoriert.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(*args, **kwargs)

    def clean(self, value):
        value = self.to_python(value)
        if value in self.empty_values or not self.valid_value(value):
            return None
        return value
