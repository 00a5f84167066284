from django.contrib import admin
from .models import (
  Product,
  ProductMeta,
  Order,
  OrderItem,
  OrderMeta,
)


class ProductMetaInline(admin.TabularInline):
  model = ProductMeta
  extra = 0


class OrderItemInline(admin.TabularInline):
  model = OrderItem
  extra = 0


class OrderMetaInline(admin.TabularInline):
  """Freie Metadaten; Schlüssel mit führendem ``_`` gelten als geschützt und werden ausgeblendet."""
  model = OrderMeta
  extra = 0

  def get_queryset(self, request):
      return super().get_queryset(request).exclude(key__startswith='_')


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
  list_display = ('name', 'sku', 'price', 'active')
  list_filter = ('active',)
  search_fields = ('name', 'sku')
  fieldsets = (
      (None, {'fields': ('name', 'sku', 'price', 'description', 'active')}),
  )
  inlines = (ProductMetaInline,)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
  list_display = ('id', 'customer_name', 'customer_email', 'status', 'created_at')
  list_filter = ('status', 'created_at')
  search_fields = ('customer_name', 'customer_email')
  fieldsets = (
      (None, {'fields': ('customer_name', 'customer_email', 'status', 'created_at')}),
  )
  inlines = (OrderItemInline, OrderMetaInline)
