import json
import logging
from django.core.cache import cache
from config.models import PlatformSetting

logger = logging.getLogger(__name__)

CACHE_TIMEOUT = 60 * 5  # 5 Minuten


def _cache_key(key):
  return f"app_setting:{key}"


def _cast(val, cast_type):
  if cast_type == bool:
      return val.lower() in ("true", "1", "yes", "on")
  if cast_type == int:
      return int(val)
  if cast_type == float:
      return float(val)
  if cast_type == list or cast_type == dict:
      parsed = json.loads(val)
      if not isinstance(parsed, cast_type):
          raise TypeError(f"expected {cast_type.__name__}, got {type(parsed).__name__}")
      return parsed
  return cast_type(val)


def get_app_setting(key, default=None, cast_type=str):
  """
  Liefert einen Wert aus der Datenbank / dem Cache.
  * cast_type: str, int, bool, float, list, dict
  * Fehlt der Schlüssel oder lässt sich der Wert nicht umwandeln, wird
    ``default`` zurückgegeben.
  """
  cached = cache.get(_cache_key(key))
  if cached is not None:
      # Kopie, damit Aufrufer den Cache‑Eintrag nicht verändern
      return cast_type(cached) if cast_type in (list, dict) else cached

  try:
      setting = PlatformSetting.objects.get(key=key)
  except PlatformSetting.DoesNotExist:
      return default

  # ggf. typkonvertieren
  try:
      val = _cast(setting.value, cast_type)
  except (TypeError, ValueError) as exc:
      logger.warning("Setting %r has an unreadable value (%s) – using default.", key, exc)
      return default

  # Cache
  cache.set(_cache_key(key), val, CACHE_TIMEOUT)
  return cast_type(val) if cast_type in (list, dict) else val


def set_app_setting(key, value, description=None):
  """
  Speichert einen Wert (list/dict als JSON, alles andere als Text) und
  leert den Cache‑Eintrag.
  """
  if isinstance(value, (list, dict)):
      raw = json.dumps(value, sort_keys=True)
  elif isinstance(value, bool):
      raw = "true" if value else "false"
  else:
      raw = str(value)

  defaults = {"value": raw}
  if description is not None:
      defaults["description"] = description

  setting, created = PlatformSetting.objects.update_or_create(key=key, defaults=defaults)
  invalidate_app_setting(key)
  logger.debug("Setting %r %s.", key, "created" if created else "updated")
  return setting


def invalidate_app_setting(key):
  cache.delete(_cache_key(key))
