from django.db import models

class PlatformSetting(models.Model):
  """
  Ein Schlüssel‑Wert‑Paar für app‑spezifische Einstellungen.

  Die Geburtsdaten‑Optionen liegen als JSON‑Objekt unter einem einzigen
  Schlüssel (siehe ``birthday.constants.FIELD_OPTIONS``).
  """
  key = models.CharField(max_length=200, unique=True)
  value = models.TextField()  # JSON/Text/Int etc.
  description = models.CharField(max_length=500, blank=True)
  last_modified = models.DateTimeField(auto_now=True)

  class Meta:
      ordering = ['key']
      verbose_name = "Platform Setting"
      verbose_name_plural = "Platform Settings"

  def __str__(self):
      return f"{self.key} = {self.value}"
