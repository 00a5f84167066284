"""
Geburtsdaten im Admin: Bestellung bearbeiten und Produkt‑Einstellung.

Die Admins des Shops werden abgemeldet und durch Unterklassen ersetzt, die
die zusätzlichen Felder einblenden und speichern.
"""
import logging

from django import forms
from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from shop.admin import OrderAdmin, ProductAdmin
from shop.models import Order, Product

from .constants import (
    BIRTHDATETIME_ORDER_META,
    BIRTHPLACE_ORDER_META,
    MIN_YEAR,
    MAX_YEAR,
    REQUIRES_BIRTH_DETAILS_PRODUCT_META,
)
from .options import field_options
from .utils import (
    get_birth_place,
    get_display_birth_datetime,
    order_requires_birthday_details,
    parse_birth_datetime,
    product_requires_birth_details,
)

logger = logging.getLogger(__name__)

ADMIN_DATETIME_FORMAT = '%Y-%m-%dT%H:%M'


class BirthdayOrderAdminForm(forms.ModelForm):
  birth_datetime = forms.CharField(
      required=False,
      label=_('Birth Date'),
      widget=forms.DateTimeInput(attrs={
          'type': 'datetime-local',
          'placeholder': _('Click to pick date'),
          'min': f'{MIN_YEAR}-01-01T00:00',
          'max': f'{MAX_YEAR}-12-31T23:59',
      }),
  )
  birth_place = forms.CharField(
      required=False,
      max_length=255,
      label=_('Birth Place'),
      widget=forms.TextInput(attrs={'placeholder': _('Town and country')}),
  )

  class Meta:
      model = Order
      fields = '__all__'

  def __init__(self, *args, **kwargs):
      super().__init__(*args, **kwargs)
      if self.instance.pk:
          raw = self.instance.get_meta(BIRTHDATETIME_ORDER_META)
          try:
              birth = parse_birth_datetime(raw)
          except ValueError:
              # z.B. nur Uhrzeit (0000-00-00): Rohwert als Text zeigen, damit er erhalten bleibt
              self.fields['birth_datetime'].widget = forms.TextInput()
              self.fields['birth_datetime'].initial = raw
          else:
              self.fields['birth_datetime'].initial = birth.strftime(ADMIN_DATETIME_FORMAT) if birth else ''
          self.fields['birth_place'].initial = get_birth_place(self.instance)


admin.site.unregister(Order)

@admin.register(Order)
class BirthdayOrderAdmin(OrderAdmin):
  form = BirthdayOrderAdminForm
  list_display = OrderAdmin.list_display + ('birth_date_display', 'birth_place_display')

  @admin.display(description=_('Birth Date'))
  def birth_date_display(self, obj):
      return get_display_birth_datetime(obj)

  @admin.display(description=_('Birth Place'))
  def birth_place_display(self, obj):
      return get_birth_place(obj)

  def birthday_fields(self, obj):
      """Die Geburtsdaten‑Felder, die für diese Bestellung angezeigt werden."""
      options = field_options()
      if not order_requires_birthday_details(obj, options):
          return ()
      fields = ()
      if options.date_enabled() or options.time_enabled():
          fields += ('birth_datetime',)
      if options.place_enabled():
          fields += ('birth_place',)
      return fields

  def get_fieldsets(self, request, obj=None):
      fieldsets = list(super().get_fieldsets(request, obj))
      fields = self.birthday_fields(obj)
      if fields:
          fieldsets.append((_('Birth Details'), {'fields': fields}))
      return fieldsets

  def get_form(self, request, obj=None, change=False, **kwargs):
      form = super().get_form(request, obj, change=change, **kwargs)
      # Die deklarierten Felder sind immer im Formular; gespeichert wird nur, was angezeigt wurde
      form.birthday_fields = self.birthday_fields(obj)
      return form

  def save_related(self, request, form, formsets, change):
      super().save_related(request, form, formsets, change)
      fields = [
          name for name in getattr(form, 'birthday_fields', ())
          if name in form.changed_data
      ]
      self.save_birthday_fields(request, form.instance, form.cleaned_data, fields)

  def save_birthday_fields(self, request, order, cleaned_data, fields=None):
      """Schreibt die Geburtsdaten‑Felder; ``fields=None`` heißt: alle für diese Bestellung."""
      if fields is None:
          fields = self.birthday_fields(order)

      if 'birth_datetime' in fields:
          raw = (cleaned_data.get('birth_datetime') or '').strip()
          try:
              birth = parse_birth_datetime(raw)
          except ValueError:
              # Ungültiges Datum nicht speichern, nur melden
              messages.error(request, _('%(value)s is an invalid birth date/time - ignored') % {'value': raw})
              logger.warning("Order %s: ignored invalid birth date/time %r.", order.pk, raw)
          else:
              order.update_meta(BIRTHDATETIME_ORDER_META, birth.isoformat() if birth else '')

      if 'birth_place' in fields:
          order.update_meta(BIRTHPLACE_ORDER_META, cleaned_data.get('birth_place') or '')


class BirthdayProductAdminForm(forms.ModelForm):
  requires_birth_details = forms.BooleanField(
      required=False,
      label=_('Requires birth details'),
      help_text=_('Select whether customer should be asked for birth details when purchasing this product.'),
  )

  class Meta:
      model = Product
      fields = '__all__'

  def __init__(self, *args, **kwargs):
      super().__init__(*args, **kwargs)
      if self.instance.pk:
          self.fields['requires_birth_details'].initial = product_requires_birth_details(self.instance)


admin.site.unregister(Product)

@admin.register(Product)
class BirthdayProductAdmin(ProductAdmin):
  form = BirthdayProductAdminForm
  list_display = ProductAdmin.list_display + ('requires_birth_details_display',)

  @admin.display(description=_('Requires birth details'), boolean=True)
  def requires_birth_details_display(self, obj):
      return product_requires_birth_details(obj)

  def get_fieldsets(self, request, obj=None):
      return list(super().get_fieldsets(request, obj)) + [
          (_('Birth Details'), {'fields': ('requires_birth_details',)}),
      ]

  def save_related(self, request, form, formsets, change):
      # Nach den Meta‑Inlines speichern, damit das Häkchen gewinnt
      super().save_related(request, form, formsets, change)
      flag = form.cleaned_data.get('requires_birth_details', False)
      form.instance.update_meta(REQUIRES_BIRTH_DETAILS_PRODUCT_META, 'yes' if flag else 'no')
      logger.info("Product %s: requires birth details = %s.", form.instance.pk, flag)
