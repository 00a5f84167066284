"""View tests.

Tests for:
- checkout: birthday fields shown/hidden, validation errors block the order,
  valid submissions store order metadata
- order_received: only the own order or staff
- field_settings: access control, save, invalid input ignored
"""
import pytest
from django.urls import reverse

from birthday.constants import (
    BIRTHDATETIME_ORDER_META,
    BIRTHPLACE_ORDER_META,
    FIELD_DISABLED,
    FIELD_OPTIONAL,
    FIELD_REQUIRED,
    DATE_ENABLED_KEY,
    TIME_ENABLED_KEY,
    PLACE_ENABLED_KEY,
    DATE_AS_SELECT_KEY,
    SHOW_ALWAYS_KEY,
)
from birthday.options import FieldOptions
from shop.models import Order
from tests.conftest import store_options


CUSTOMER = {'customer_name': 'Ada Lovelace', 'customer_email': 'ada@example.com'}


def add_to_cart(client, product, quantity=1):
    return client.post(reverse('shop_cart_add', args=[product.pk]), {'quantity': quantity})


@pytest.mark.django_db
class TestCheckout:
    """Checkout with the birthday extension form."""

    def test_empty_cart_redirects_to_products(self, client):
        response = client.get(reverse('shop_checkout'))
        assert response.status_code == 302
        assert response.url == reverse('shop_product_list')

    def test_cart_add_redirects_to_checkout(self, client, product):
        response = add_to_cart(client, product, 2)
        assert response.status_code == 302
        assert response.url == reverse('shop_checkout')
        assert client.session['cart'] == {str(product.pk): 2}

    def test_cart_add_requires_post(self, client, product):
        response = client.get(reverse('shop_cart_add', args=[product.pk]))
        assert response.status_code == 405

    def test_fields_hidden_when_disabled(self, client, product):
        store_options()
        add_to_cart(client, product)
        response = client.get(reverse('shop_checkout'))
        assert response.status_code == 200
        assert 'gcobf_birthday' not in response.content.decode()
        assert response.context['extension_forms'] == []

    def test_fields_shown_when_enabled(self, client, product):
        store_options(date=FIELD_REQUIRED, time=FIELD_OPTIONAL, place=FIELD_OPTIONAL)
        add_to_cart(client, product)
        content = client.get(reverse('shop_checkout')).content.decode()
        assert 'name="gcobf_birthday"' in content
        assert 'name="gcobf_birthhour"' in content
        assert 'name="gcobf_birthplace"' in content
        assert 'gcodeobf-birthday-details-wrapper' in content
        assert 'birthday/birthday-details.css' in content

    def test_stylesheet_only_with_birthday_form(self, client, product):
        store_options()
        add_to_cart(client, product)
        content = client.get(reverse('shop_checkout')).content.decode()
        assert 'birthday-details.css' not in content

    def test_product_dependent_hides_fields_for_plain_products(self, client, product):
        store_options(date=FIELD_REQUIRED, show_always=False)
        add_to_cart(client, product)
        content = client.get(reverse('shop_checkout')).content.decode()
        assert 'gcobf_birthday' not in content

    def test_product_dependent_shows_fields_for_flagged_products(self, client, product, flagged_product):
        store_options(date=FIELD_REQUIRED, show_always=False)
        add_to_cart(client, product)
        add_to_cart(client, flagged_product)
        content = client.get(reverse('shop_checkout')).content.decode()
        assert 'name="gcobf_birthday"' in content

    def test_invalid_birth_details_block_the_order(self, client, product):
        store_options(date=FIELD_REQUIRED)
        add_to_cart(client, product)
        response = client.post(reverse('shop_checkout'), {
            **CUSTOMER,
            'gcobf_birthday': '30', 'gcobf_birthmonth': '2', 'gcobf_birthyear': '2000',
        })
        assert response.status_code == 200
        assert not Order.objects.exists()
        assert 'must be between 1 and 29' in response.content.decode()

    def test_both_forms_report_errors(self, client, product):
        store_options(place=FIELD_REQUIRED)
        add_to_cart(client, product)
        response = client.post(reverse('shop_checkout'), {'customer_name': '', 'customer_email': 'x@example.com'})
        assert response.status_code == 200
        assert response.context['form'].errors['customer_name']
        assert response.context['extension_forms'][0].errors['gcobf_birthplace'] == [
            'Please enter your place of birth'
        ]

    def test_valid_checkout_stores_metadata(self, client, product):
        store_options(date=FIELD_REQUIRED, time=FIELD_REQUIRED, place=FIELD_REQUIRED)
        add_to_cart(client, product)
        response = client.post(reverse('shop_checkout'), {
            **CUSTOMER,
            'gcobf_birthday': '4', 'gcobf_birthmonth': '7', 'gcobf_birthyear': '1990',
            'gcobf_birthhour': '14', 'gcobf_birthmin': '5',
            'gcobf_birthplace': 'Leeds, UK',
        })
        order = Order.objects.get()
        assert response.status_code == 302
        assert response.url == reverse('shop_order_received', args=[order.pk])
        assert order.get_meta(BIRTHDATETIME_ORDER_META) == '1990-07-04T14:05:00+00:00'
        assert order.get_meta(BIRTHPLACE_ORDER_META) == 'Leeds, UK'
        assert order.items.get().product == product
        assert client.session['cart'] == {}

    def test_order_without_birthday_fields(self, client, product):
        store_options()
        add_to_cart(client, product)
        client.post(reverse('shop_checkout'), CUSTOMER)
        order = Order.objects.get()
        assert not order.meta.exists()


@pytest.mark.django_db
class TestOrderReceived:
    """Order confirmation page."""

    def test_own_order(self, client, product):
        store_options()
        add_to_cart(client, product)
        response = client.post(reverse('shop_checkout'), CUSTOMER, follow=True)
        assert response.status_code == 200
        assert b'Order received' in response.content

    def test_foreign_order_redirects(self, client, make_order, product):
        order = make_order(product)
        response = client.get(reverse('shop_order_received', args=[order.pk]))
        assert response.status_code == 302

    def test_staff_sees_any_order(self, admin_client, make_order, product):
        order = make_order(product)
        response = admin_client.get(reverse('shop_order_received', args=[order.pk]))
        assert response.status_code == 200


@pytest.mark.django_db
class TestFieldSettingsView:
    """Settings page."""

    def test_anonymous_is_redirected_to_login(self, client):
        response = client.get(reverse('birthday_field_settings'))
        assert response.status_code == 302
        assert 'login' in response.url

    def test_non_staff_is_redirected(self, client, django_user_model):
        user = django_user_model.objects.create_user(username='customer', password='pw')
        client.force_login(user)
        response = client.get(reverse('birthday_field_settings'))
        assert response.status_code == 302

    def test_get_renders_sections(self, admin_client):
        response = admin_client.get(reverse('birthday_field_settings'))
        content = response.content.decode()
        assert response.status_code == 200
        assert 'Which birthday fields to show' in content
        assert 'How to show birthday fields' in content
        assert 'When to show birthday fields' in content
        assert f'name="{DATE_ENABLED_KEY}"' in content

    def test_post_saves_settings(self, admin_client):
        response = admin_client.post(reverse('birthday_field_settings'), {
            DATE_ENABLED_KEY: '2',
            TIME_ENABLED_KEY: '1',
            PLACE_ENABLED_KEY: '0',
            DATE_AS_SELECT_KEY: '1',
            SHOW_ALWAYS_KEY: '0',
        })
        assert response.status_code == 302
        assert response.url == reverse('birthday_field_settings')

        options = FieldOptions.load()
        assert options.date_required()
        assert options.time_enabled() and not options.time_required()
        assert not options.place_enabled()
        assert options.date_as_select()
        assert not options.show_always()

    def test_post_with_garbage_keeps_previous_values(self, admin_client):
        store_options(date=FIELD_OPTIONAL, place=FIELD_REQUIRED)
        response = admin_client.post(reverse('birthday_field_settings'), {
            DATE_ENABLED_KEY: 'garbage',
            PLACE_ENABLED_KEY: '5',
            TIME_ENABLED_KEY: '2',
        }, follow=True)
        assert response.status_code == 200
        assert 'Settings saved.' in response.content.decode()

        options = FieldOptions.load()
        assert options.get_date_option() == FIELD_OPTIONAL
        assert options.get_place_option() == FIELD_REQUIRED
        assert options.get_time_option() == FIELD_REQUIRED

    def test_first_visit_creates_defaults(self, admin_client):
        admin_client.get(reverse('birthday_field_settings'))
        options = FieldOptions.load()
        assert options.get_date_option() == FIELD_DISABLED
