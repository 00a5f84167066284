from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path

from django.conf import settings

import birthday.views
import shop.views
from core.settings import STRING_TO_ADMIN_PATH

urlpatterns = [
    path(STRING_TO_ADMIN_PATH, admin.site.urls, name="admin"),
    path('', shop.views.product_list, name="shop_product_list"),
    path('cart/add/<int:pk>/', shop.views.cart_add, name="shop_cart_add"),
    path('checkout/', shop.views.checkout, name="shop_checkout"),
    path('order/<int:pk>/received/', shop.views.order_received, name="shop_order_received"),
    path('birthday/settings/', birthday.views.field_settings, name="birthday_field_settings"),
]

#this is only for development purpose
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
