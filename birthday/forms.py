from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .constants import (
    MIN_YEAR,
    MAX_YEAR,
    FIELD_DISABLED,
    FIELD_OPTIONAL,
    FIELD_REQUIRED,
    DATE_ENABLED_KEY,
    TIME_ENABLED_KEY,
    PLACE_ENABLED_KEY,
    DATE_AS_SELECT_KEY,
    TIME_AS_SELECT_KEY,
    SHOW_ALWAYS_KEY,
    ENABLED_KEYS,
    BIRTH_DAY_FIELD_ID,
    BIRTH_MONTH_FIELD_ID,
    BIRTH_YEAR_FIELD_ID,
    BIRTH_HOUR_FIELD_ID,
    BIRTH_MINUTE_FIELD_ID,
    BIRTH_PLACE_FIELD_ID,
    DATE_FIELD_IDS,
    TIME_FIELD_IDS,
)
from .fields import BirthNumberField, SettingChoiceField, validate_number
from .options import field_options
from .services import save_birthday_details
from .utils import get_number_options, get_birth_months, max_day


def _number_widget(css_class, placeholder, min_value, max_value):
    return forms.NumberInput(attrs={
        'class': css_class,
        'placeholder': placeholder,
        'min': min_value,
        'max': max_value,
    })


def _select_widget(css_class, choices):
    return forms.Select(attrs={'class': css_class}, choices=choices)


class BirthdayCheckoutForm(forms.Form):
  """
  Geburtsdatum, ‑uhrzeit und ‑ort im Checkout.

  Welche Felder es gibt, ob sie Pflicht sind und ob sie als Dropdown oder
  Zahlenfeld erscheinen, bestimmen die ``FieldOptions``. Die Prüfung der
  einzelnen Felder übernimmt ``BirthNumberField``; ``clean()`` ergänzt die
  Regeln über mehrere Felder hinweg (Tage im Monat, „alles oder nichts“ bei
  optionalen Gruppen).
  """
  template_name = 'birthday/checkout_fields.html'

  class Media:
      css = {'all': ['birthday/birthday-details.css']}

  def __init__(self, *args, options=None, **kwargs):
      super().__init__(*args, **kwargs)
      self.options = options if options is not None else field_options()

      if self.options.date_enabled():
          self._add_date_fields(self.options.date_required(), self.options.date_as_select())
      if self.options.time_enabled():
          self._add_time_fields(self.options.time_required(), self.options.time_as_select())
      if self.options.place_enabled():
          self._add_place_field(self.options.place_required())

  # ------------------------------------------------------------------
  # Felder
  # ------------------------------------------------------------------

  def _add_date_fields(self, required, as_select):
      this_year = timezone.now().year

      if as_select:
          day_widget = _select_widget('gcodeobf_day', get_number_options(1, 31, '--'))
          year_widget = _select_widget('gcodeobf_year', get_number_options(this_year, MIN_YEAR, '----'))
      else:
          day_widget = _number_widget('gcodeobf_day', _('day'), 1, 31)
          year_widget = _number_widget('gcodeobf_year', _('year'), MIN_YEAR, this_year)

      self.fields[BIRTH_DAY_FIELD_ID] = BirthNumberField(
          title=_('day of birth'), min_value=1, max_value=31,
          required=required, label=_('Date'), widget=day_widget,
      )
      # Monat ist immer ein Dropdown, auch wenn Tag/Jahr Zahlenfelder sind
      self.fields[BIRTH_MONTH_FIELD_ID] = BirthNumberField(
          title=_('month of birth'), min_value=1, max_value=12,
          required=required, label=_('Month'),
          widget=_select_widget('gcodeobf_month', get_birth_months(_('--month--'))),
      )
      self.fields[BIRTH_YEAR_FIELD_ID] = BirthNumberField(
          title=_('year of birth'), min_value=MIN_YEAR, max_value=MAX_YEAR,
          required=required, label=_('Year'), widget=year_widget,
      )
      self.fields[BIRTH_MONTH_FIELD_ID].hide_label = True
      self.fields[BIRTH_YEAR_FIELD_ID].hide_label = True

  def _add_time_fields(self, required, as_select):
      if as_select:
          hour_widget = _select_widget('gcodeobf_time', get_number_options(0, 23, '--'))
          minute_widget = _select_widget('gcodeobf_time', get_number_options(0, 59, '--'))
      else:
          hour_widget = _number_widget('gcodeobf_time', _('hr'), 0, 23)
          minute_widget = _number_widget('gcodeobf_time', _('min'), 0, 59)

      self.fields[BIRTH_HOUR_FIELD_ID] = BirthNumberField(
          title=_('hour of birth'), min_value=0, max_value=23,
          required=required, label=_('Time'), widget=hour_widget,
      )
      self.fields[BIRTH_MINUTE_FIELD_ID] = BirthNumberField(
          title=_('minute of birth'), min_value=0, max_value=59,
          required=required, label=_('Minute'), widget=minute_widget,
      )
      self.fields[BIRTH_MINUTE_FIELD_ID].hide_label = True

  def _add_place_field(self, required):
      self.fields[BIRTH_PLACE_FIELD_ID] = forms.CharField(
          required=required,
          max_length=255,
          label=_('Location'),
          widget=forms.TextInput(attrs={'placeholder': _('town, county and country')}),
          error_messages={'required': _('Please enter your place of birth')},
      )

  # ------------------------------------------------------------------
  # Darstellung
  # ------------------------------------------------------------------

  @property
  def heading(self):
      if not self.fields:
          return ''
      heading = getattr(settings, 'BIRTHDAY_FIELDS_HEADING', None)
      return _('Birth Details') if heading is None else heading

  @property
  def date_fields(self):
      return [self[name] for name in DATE_FIELD_IDS if name in self.fields]

  @property
  def time_fields(self):
      return [self[name] for name in TIME_FIELD_IDS if name in self.fields]

  @property
  def place_field(self):
      return self[BIRTH_PLACE_FIELD_ID] if BIRTH_PLACE_FIELD_ID in self.fields else None

  # ------------------------------------------------------------------
  # Prüfung über mehrere Felder
  # ------------------------------------------------------------------

  def clean(self):
      cleaned_data = super().clean()

      if self.options.date_enabled():
          self._check_day_in_month(cleaned_data)
          if not self.options.date_required():
              self._check_group_complete({
                  BIRTH_DAY_FIELD_ID: _("Enter birth day, or leave all birth date fields blank"),
                  BIRTH_MONTH_FIELD_ID: _("Enter birth month, or leave all birth date fields blank"),
                  BIRTH_YEAR_FIELD_ID: _("Enter birth year, or leave all birth date fields blank"),
              })

      if self.options.time_enabled() and not self.options.time_required():
          self._check_group_complete({
              BIRTH_HOUR_FIELD_ID: _("Enter birth hour, or leave birth minute blank"),
              BIRTH_MINUTE_FIELD_ID: _("Enter birth minute, or leave birth hour blank"),
          })

      return cleaned_data

  def _check_day_in_month(self, cleaned_data):
      """Obergrenze für den Tag aus gültigem Monat und Jahr; sonst bleibt es bei 31."""
      day = cleaned_data.get(BIRTH_DAY_FIELD_ID)
      month = cleaned_data.get(BIRTH_MONTH_FIELD_ID)
      year = cleaned_data.get(BIRTH_YEAR_FIELD_ID)
      if day is None or month is None or year is None:
          return
      field = self.fields[BIRTH_DAY_FIELD_ID]
      try:
          validate_number(day, field.required, field.title, 1, max_day(month, year))
      except ValidationError as exc:
          self.add_error(BIRTH_DAY_FIELD_ID, exc)

  def _check_group_complete(self, messages):
      """
      Optionale Gruppe: entweder alle Felder ausgefüllt oder alle leer.

      Ungültige Felder zählen als ausgefüllt (sie haben schon einen Fehler);
      für jedes leere Feld einer teilweise ausgefüllten Gruppe gibt es einen
      eigenen Fehler.
      """
      empty = [
          name for name in messages
          if not self.has_error(name) and self.cleaned_data.get(name) is None
      ]
      if empty and len(empty) < len(messages):
          for name in empty:
              self.add_error(name, ValidationError(messages[name], code='incomplete'))

  # ------------------------------------------------------------------

  def save(self, order):
      """Schreibt die geprüften Werte in die Metadaten der Bestellung."""
      return save_birthday_details(order, self.cleaned_data, self.options)


# ----------------------------------------------------------------------
# Einstellungsseite
# ----------------------------------------------------------------------

ENABLED_CHOICES = [
    (str(FIELD_DISABLED), _('Disabled')),
    (str(FIELD_OPTIONAL), _('Enabled')),
    (str(FIELD_REQUIRED), _('Required')),
]

INPUT_TYPE_CHOICES = [
    ('0', _('Number Input')),
    ('1', _('Dropdown')),
]

SHOW_CHOICES = [
    ('1', _('Always')),
    ('0', _('Product dependent')),
]


class FieldOptionsForm(forms.Form):
  """
  Formular der Einstellungsseite.

  Meldet nie Fehler: ungültige Auswahlwerte werden zu ``None`` und beim
  Speichern von ``validate_field_settings`` ignoriert.
  """
  gcobf_date_enabled = SettingChoiceField(label=_('Display Birth Date'), choices=ENABLED_CHOICES)
  gcobf_time_enabled = SettingChoiceField(label=_('Display Birth Time'), choices=ENABLED_CHOICES)
  gcobf_place_enabled = SettingChoiceField(label=_('Display Birth Place'), choices=ENABLED_CHOICES)
  gcobf_date_select = SettingChoiceField(
      label=_('Birth Date Input Type'), choices=INPUT_TYPE_CHOICES,
      help_text=_('Month (if shown) will always be a dropdown even if day/year is a number input.'),
  )
  gcobf_time_select = SettingChoiceField(label=_('Birth Time Input Type'), choices=INPUT_TYPE_CHOICES)
  gcobf_show_always = SettingChoiceField(label=_('Show fields'), choices=SHOW_CHOICES)

  SECTIONS = (
      (_('Which birthday fields to show'), 'enabled', (DATE_ENABLED_KEY, TIME_ENABLED_KEY, PLACE_ENABLED_KEY)),
      (_('How to show birthday fields'), 'type', (DATE_AS_SELECT_KEY, TIME_AS_SELECT_KEY)),
      (_('When to show birthday fields'), 'when', (SHOW_ALWAYS_KEY,)),
  )

  def __init__(self, *args, options=None, **kwargs):
      self.options = options if options is not None else field_options()
      kwargs.setdefault('initial', self._initial_from_options())
      super().__init__(*args, **kwargs)

      # Ohne gespeicherten Wert eine „Bitte wählen“-Option voranstellen
      for name, field in self.fields.items():
          if self.initial.get(name) is None:
              field.choices = [('', _('Select...'))] + list(field.choices)

  def _initial_from_options(self):
      initial = {}
      for key in ENABLED_KEYS:
          state = self.options.state_for(key)
          initial[key] = None if state is None else str(state)
      for key in (DATE_AS_SELECT_KEY, TIME_AS_SELECT_KEY, SHOW_ALWAYS_KEY):
          flag = self.options.flag_for(key)
          initial[key] = None if flag is None else ('1' if flag else '0')
      return initial

  @property
  def sections(self):
      return [
          {'title': title, 'slug': slug, 'fields': [self[name] for name in names]}
          for title, slug, names in self.SECTIONS
      ]

  def save(self):
      submitted = {key: value for key, value in self.cleaned_data.items() if value is not None}
      return self.options.update(submitted)
