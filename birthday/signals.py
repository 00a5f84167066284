from django.dispatch import Signal, receiver

from shop.signals import checkout_forms
from .forms import BirthdayCheckoutForm
from .options import field_options
from .utils import cart_requires_birthday_details
import logging

logger = logging.getLogger(__name__)

# Wird in BirthdayConfig.ready() gesendet (Argument: ``version``), damit
# abhängige Apps wissen, dass die Geburtsdaten‑Felder verfügbar sind.
birthday_details_loaded = Signal()


@receiver(checkout_forms)
def birthday_checkout_form(sender, request, cart, data=None, **kwargs):
  """Liefert das Geburtsdaten‑Formular, wenn der Warenkorb es verlangt."""
  options = field_options()
  if not options.any_enabled():
      return None
  if not cart_requires_birthday_details(cart.products(), options):
      return None
  return BirthdayCheckoutForm(data, options=options)
