from django import forms
from django.db import transaction
from django.utils.translation import gettext_lazy as _

from .models import Order, OrderItem


class CheckoutForm(forms.ModelForm):
  class Meta:
      model = Order
      fields = ('customer_name', 'customer_email')
      labels = {
          'customer_name': _('Name'),
          'customer_email': _('Email address'),
      }
      widgets = {
          'customer_name': forms.TextInput(attrs={'class': 'form-control'}),
          'customer_email': forms.EmailInput(attrs={'class': 'form-control'}),
      }

  @transaction.atomic
  def save_order(self, cart):
      """Legt die Bestellung inkl. Positionen aus dem Warenkorb an."""
      order = self.save()
      OrderItem.objects.bulk_create([
          OrderItem(
              order=order,
              product=product,
              name=product.name,
              quantity=quantity,
              unit_price=product.price,
          )
          for product, quantity in cart.items()
      ])
      return order
