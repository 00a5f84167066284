from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)

class BirthdayConfig(AppConfig):
  name = 'birthday'
  verbose_name = 'Birthday Details'

  def ready(self):
      # Importiere Checks und Signals hier, damit sie beim App‑Start registriert werden.
      import birthday.checks  # noqa
      from birthday import __version__
      from birthday.signals import birthday_details_loaded

      birthday_details_loaded.send(sender=self.__class__, version=__version__)
      logger.debug("Birthday details %s loaded.", __version__)
