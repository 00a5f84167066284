from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)

class ShopConfig(AppConfig):
  name = 'shop'
  verbose_name = 'Shop'
