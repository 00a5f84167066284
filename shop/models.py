from decimal import Decimal

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class MetaDataMixin:
  """
  Schlüssel‑Wert‑Metadaten an einem Objekt.

  Die erbende Klasse setzt ``meta_related_name`` auf den ``related_name``
  ihres Meta‑Modells (z.B. ``'meta'``). Werte werden immer als Text
  gespeichert; ``get_meta`` liefert ``default``, wenn kein Eintrag existiert.
  """
  meta_related_name = 'meta'

  def _meta_manager(self):
      return getattr(self, self.meta_related_name)

  def get_meta(self, key, default=''):
      entry = self._meta_manager().filter(key=key).first()
      return entry.value if entry is not None else default

  def has_meta(self, key):
      return self._meta_manager().filter(key=key).exists()

  def update_meta(self, key, value):
      """Legt den Eintrag an oder überschreibt ihn."""
      entry, _created = self._meta_manager().update_or_create(
          key=key, defaults={'value': '' if value is None else str(value)},
      )
      return entry


class Product(MetaDataMixin, models.Model):
  """Ein kaufbarer Katalogartikel."""
  name = models.CharField(max_length=200)
  sku = models.CharField(max_length=64, unique=True)
  price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
  description = models.TextField(blank=True)
  active = models.BooleanField(default=True)

  class Meta:
      ordering = ['name']
      verbose_name = _("Product")
      verbose_name_plural = _("Products")

  def __str__(self):
      return self.name


class ProductMeta(models.Model):
  product = models.ForeignKey(Product, related_name='meta', on_delete=models.CASCADE)
  key = models.CharField(max_length=255)
  value = models.TextField(blank=True)

  class Meta:
      unique_together = ('product', 'key')
      verbose_name = "Product Meta"
      verbose_name_plural = "Product Meta"

  def __str__(self):
      return f"{self.product}: {self.key}"


class Order(MetaDataMixin, models.Model):
  """Eine abgeschlossene oder laufende Bestellung."""
  STATUS_PENDING = 'pending'
  STATUS_PROCESSING = 'processing'
  STATUS_COMPLETED = 'completed'
  STATUS_CANCELLED = 'cancelled'

  STATUS_CHOICES = [
      (STATUS_PENDING, _('Pending payment')),
      (STATUS_PROCESSING, _('Processing')),
      (STATUS_COMPLETED, _('Completed')),
      (STATUS_CANCELLED, _('Cancelled')),
  ]

  customer_name = models.CharField(max_length=200)
  customer_email = models.EmailField()
  status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)
  created_at = models.DateTimeField(default=timezone.now)

  class Meta:
      ordering = ['-created_at']
      verbose_name = _("Order")
      verbose_name_plural = _("Orders")

  def __str__(self):
      return f"#{self.pk} – {self.customer_name}"

  @property
  def total(self):
      return sum((item.line_total for item in self.items.all()), Decimal('0.00'))


class OrderItem(models.Model):
  order = models.ForeignKey(Order, related_name='items', on_delete=models.CASCADE)
  product = models.ForeignKey(Product, related_name='order_items', null=True, on_delete=models.SET_NULL)
  name = models.CharField(max_length=200)
  quantity = models.PositiveIntegerField(default=1)
  unit_price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))

  class Meta:
      verbose_name = "Order Item"
      verbose_name_plural = "Order Items"

  def __str__(self):
      return f"{self.quantity} × {self.name}"

  @property
  def line_total(self):
      return self.unit_price * self.quantity


class OrderMeta(models.Model):
  order = models.ForeignKey(Order, related_name='meta', on_delete=models.CASCADE)
  key = models.CharField(max_length=255)
  value = models.TextField(blank=True)

  class Meta:
      unique_together = ('order', 'key')
      verbose_name = "Order Meta"
      verbose_name_plural = "Order Meta"

  def __str__(self):
      return f"{self.order}: {self.key}"
