"""
Erweiterungspunkte des Shops.

``checkout_forms``
    Wird beim Aufbau der Checkout‑Seite gesendet. Receiver bekommen
    ``request``, ``cart`` und ``data`` (``request.POST`` oder ``None``) und
    liefern ein Formular mit ``save(order)`` zurück – oder ``None``, wenn sie
    für diesen Warenkorb nichts beitragen.

``order_created``
    Wird nach dem Anlegen einer Bestellung im Checkout gesendet (innerhalb
    derselben Transaktion).
"""
from django.dispatch import Signal

checkout_forms = Signal()
order_created = Signal()


def collect_checkout_forms(request, cart, data=None):
  """Fragt alle Receiver ab und gibt die gelieferten Formulare zurück."""
  responses = checkout_forms.send(sender=cart.__class__, request=request, cart=cart, data=data)
  return [form for _receiver, form in responses if form is not None]
