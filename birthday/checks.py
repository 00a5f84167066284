from django.apps import apps
from django.core.checks import Warning, register


@register()
def check_shop_installed(app_configs, **kwargs):
  """Ohne Shop‑App gibt es weder Checkout noch Bestellungen – nur ein Hinweis."""
  if apps.is_installed('shop'):
      return []
  return [
      Warning(
          "The birthday details app requires the 'shop' app.",
          hint="Add 'shop.apps.ShopConfig' to INSTALLED_APPS to enable birthday details features.",
          id='birthday.W001',
      )
  ]
