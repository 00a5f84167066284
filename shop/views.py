import logging

from django.conf import settings
from django.db import transaction
from django.shortcuts import render, redirect, get_object_or_404
from django.views.decorators.http import require_POST
from django_smart_ratelimit import rate_limit

from .cart import Cart
from .forms import CheckoutForm
from .models import Product, Order
from .signals import collect_checkout_forms, order_created

logger = logging.getLogger(__name__)

IP_RATE = f'{settings.IP_RATELIMIT_PER_MINUTE}/m'


@rate_limit(key='ip', rate=IP_RATE, block=True)
def product_list(request):
    products = Product.objects.filter(active=True)
    return render(request, 'shop/product_list.html', {
        'products': products,
        'cart': Cart(request),
        "PLATFORM_NAME": settings.PLATFORM_NAME,
    })


@require_POST
@rate_limit(key='ip', rate=IP_RATE, block=True)
def cart_add(request, pk):
    product = get_object_or_404(Product, pk=pk, active=True)
    try:
        quantity = max(1, int(request.POST.get('quantity', 1)))
    except (TypeError, ValueError):
        quantity = 1
    Cart(request).add(product, quantity)
    return redirect('shop_checkout')


@rate_limit(key='ip', rate=IP_RATE, block=True)
def checkout(request):
    """
    Checkout mit Erweiterungs‑Formularen.

    Die Bestellung wird nur angelegt, wenn das Checkout‑Formular *und* alle
    über ``checkout_forms`` gelieferten Formulare gültig sind.
    """
    cart = Cart(request)
    if cart.is_empty():
        return redirect('shop_product_list')

    data = request.POST if request.method == 'POST' else None
    form = CheckoutForm(data)
    extension_forms = collect_checkout_forms(request, cart, data)

    if request.method == 'POST':
        # Alle Formulare validieren (kein Kurzschluss), damit jedes seine Fehler anzeigt
        results = [form.is_valid()] + [extra.is_valid() for extra in extension_forms]
        if all(results):
            with transaction.atomic():
                order = form.save_order(cart)
                for extra in extension_forms:
                    extra.save(order)
                order_created.send(sender=Order, order=order, request=request)
            cart.clear()
            request.session['last_order_id'] = order.pk
            logger.info("Order %s created via checkout.", order.pk)
            return redirect('shop_order_received', pk=order.pk)

    return render(request, 'shop/checkout.html', {
        'form': form,
        'extension_forms': extension_forms,
        'cart_items': cart.items(),
        "PLATFORM_NAME": settings.PLATFORM_NAME,
    })


@rate_limit(key='ip', rate=IP_RATE, block=True)
def order_received(request, pk):
    # Nur die eigene, gerade abgeschlossene Bestellung (oder Staff)
    if not request.user.is_staff and request.session.get('last_order_id') != pk:
        return redirect('shop_product_list')
    order = get_object_or_404(Order, pk=pk)
    return render(request, 'shop/order_received.html', {
        'order': order,
        "PLATFORM_NAME": settings.PLATFORM_NAME,
    })
