from django.contrib import admin
from config.models import PlatformSetting
from config.utils import invalidate_app_setting

@admin.register(PlatformSetting)
class PlatformSettingAdmin(admin.ModelAdmin):
  list_display = ("key", "value", "description", "last_modified")
  search_fields = ("key", "value")
  readonly_fields = ("last_modified",)

  def save_model(self, request, obj, form, change):
      super().save_model(request, obj, form, change)
      # Cache leeren, sonst greift die Änderung erst nach CACHE_TIMEOUT
      invalidate_app_setting(obj.key)

  def delete_model(self, request, obj):
      super().delete_model(request, obj)
      invalidate_app_setting(obj.key)
