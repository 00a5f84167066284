"""App wiring tests.

Tests for:
- checkout_forms receiver: contributes the birthday form only when needed
- birthday_details_loaded signal and the shop system check
- birthday_options management command
"""
from io import StringIO

import pytest
from django.apps import apps
from django.core.management import call_command
from django.core.management.base import CommandError

import birthday
from birthday.apps import BirthdayConfig
from birthday.checks import check_shop_installed
from birthday.constants import FIELD_OPTIONAL, FIELD_REQUIRED
from birthday.forms import BirthdayCheckoutForm
from birthday.options import FieldOptions
from birthday.signals import birthday_checkout_form, birthday_details_loaded
from shop.signals import collect_checkout_forms
from tests.conftest import FakeCart, store_options


@pytest.mark.django_db
class TestCheckoutFormsReceiver:
    """The receiver connected to shop.signals.checkout_forms."""

    def test_nothing_enabled(self, rf, product):
        store_options(show_always=True)
        assert birthday_checkout_form(sender=FakeCart, request=rf.get('/'), cart=FakeCart([product])) is None

    def test_enabled_and_show_always(self, rf, product):
        store_options(date=FIELD_REQUIRED)
        form = birthday_checkout_form(sender=FakeCart, request=rf.get('/'), cart=FakeCart([product]))
        assert isinstance(form, BirthdayCheckoutForm)
        assert not form.is_bound

    def test_product_dependent(self, rf, product, flagged_product):
        store_options(place=FIELD_OPTIONAL, show_always=False)
        request = rf.get('/')
        assert birthday_checkout_form(sender=FakeCart, request=request, cart=FakeCart([product])) is None
        form = birthday_checkout_form(sender=FakeCart, request=request, cart=FakeCart([flagged_product]))
        assert isinstance(form, BirthdayCheckoutForm)

    def test_bound_with_posted_data(self, rf, product):
        store_options(place=FIELD_REQUIRED)
        forms = collect_checkout_forms(rf.post('/'), FakeCart([product]), {'gcobf_birthplace': 'York'})
        assert len(forms) == 1
        assert forms[0].is_valid()
        assert forms[0].cleaned_data['gcobf_birthplace'] == 'York'


class TestAppLoading:
    """ready() and the system check."""

    def test_loaded_signal_carries_version(self):
        received = []

        def listener(sender, version, **kwargs):
            received.append((sender, version))

        birthday_details_loaded.connect(listener)
        try:
            apps.get_app_config('birthday').ready()
        finally:
            birthday_details_loaded.disconnect(listener)

        assert received == [(BirthdayConfig, birthday.__version__)]

    def test_check_passes_with_shop(self):
        assert check_shop_installed(None) == []

    def test_check_warns_without_shop(self, monkeypatch):
        monkeypatch.setattr(apps, 'is_installed', lambda name: False)
        warnings = check_shop_installed(None)
        assert len(warnings) == 1
        assert warnings[0].id == 'birthday.W001'


@pytest.mark.django_db
class TestBirthdayOptionsCommand:
    """./manage.py birthday_options"""

    def run(self, *args):
        out = StringIO()
        call_command('birthday_options', *args, stdout=out)
        return out.getvalue()

    def test_show_defaults(self):
        output = self.run()
        assert 'updated' not in output
        assert 'date         disabled' in output
        assert 'show-always  no' in output

    def test_update(self):
        output = self.run('--date', 'required', '--place', 'optional', '--time-select', 'yes')
        assert 'Birthday field options updated.' in output
        assert 'date         required' in output

        options = FieldOptions.load()
        assert options.date_required()
        assert options.place_enabled() and not options.place_required()
        assert options.time_as_select()

    def test_partial_update_keeps_other_values(self):
        store_options(date=FIELD_OPTIONAL, show_always=True)
        self.run('--time', 'required')
        options = FieldOptions.load()
        assert options.get_date_option() == FIELD_OPTIONAL
        assert options.time_required()
        assert options.show_always()

    def test_rejects_unknown_state(self):
        with pytest.raises(CommandError):
            self.run('--date', 'sometimes')
