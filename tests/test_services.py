"""Order metadata tests.

Tests for:
- save_birthday_details: what ends up in the order metadata for each
  combination of enabled fields and product conditions
- display helpers used by the order admin
"""
import pytest

from birthday.constants import (
    BIRTHDATETIME_ORDER_META,
    BIRTHPLACE_ORDER_META,
    FIELD_OPTIONAL,
    FIELD_REQUIRED,
)
from birthday.services import save_birthday_details
from birthday.utils import get_birth_place, get_display_birth_datetime
from tests.conftest import make_options


FULL_DATA = {
    'gcobf_birthday': 4,
    'gcobf_birthmonth': 7,
    'gcobf_birthyear': 1990,
    'gcobf_birthhour': 14,
    'gcobf_birthmin': 5,
    'gcobf_birthplace': '  Leeds, UK ',
}


@pytest.mark.django_db
class TestSaveBirthdayDetails:
    """Tests for save_birthday_details."""

    def test_all_fields(self, make_order, product):
        order = make_order(product)
        options = make_options(date=FIELD_REQUIRED, time=FIELD_REQUIRED, place=FIELD_REQUIRED)

        assert save_birthday_details(order, FULL_DATA, options) is True
        assert order.get_meta(BIRTHDATETIME_ORDER_META) == '1990-07-04T14:05:00+00:00'
        assert order.get_meta(BIRTHPLACE_ORDER_META) == 'Leeds, UK'

    def test_date_only(self, make_order, product):
        order = make_order(product)
        save_birthday_details(order, FULL_DATA, make_options(date=FIELD_REQUIRED))
        assert order.get_meta(BIRTHDATETIME_ORDER_META) == '1990-07-04T00:00:00+00:00'
        assert not order.has_meta(BIRTHPLACE_ORDER_META)

    def test_time_only(self, make_order, product):
        order = make_order(product)
        save_birthday_details(order, FULL_DATA, make_options(time=FIELD_REQUIRED))
        assert order.get_meta(BIRTHDATETIME_ORDER_META) == '0000-00-00T14:05:00+00:00'

    def test_optional_fields_left_blank(self, make_order, product):
        order = make_order(product)
        data = {'gcobf_birthday': None, 'gcobf_birthmonth': None, 'gcobf_birthyear': None,
                'gcobf_birthplace': ''}
        options = make_options(date=FIELD_OPTIONAL, place=FIELD_OPTIONAL)

        assert save_birthday_details(order, data, options) is False
        assert not order.has_meta(BIRTHDATETIME_ORDER_META)
        assert not order.has_meta(BIRTHPLACE_ORDER_META)

    def test_disabled_groups_are_not_saved(self, make_order, product):
        order = make_order(product)
        assert save_birthday_details(order, FULL_DATA, make_options()) is False
        assert not order.meta.exists()

    def test_product_dependent_without_flagged_product(self, make_order, product):
        order = make_order(product)
        options = make_options(date=FIELD_REQUIRED, place=FIELD_REQUIRED, show_always=False)
        assert save_birthday_details(order, FULL_DATA, options) is False
        assert not order.meta.exists()

    def test_product_dependent_with_flagged_product(self, make_order, product, flagged_product):
        order = make_order(product, flagged_product)
        options = make_options(place=FIELD_REQUIRED, show_always=False)
        assert save_birthday_details(order, FULL_DATA, options) is True
        assert get_birth_place(order) == 'Leeds, UK'


@pytest.mark.django_db
class TestDisplayHelpers:
    """Tests for the admin display helpers."""

    def test_no_value(self, make_order, product):
        assert get_display_birth_datetime(make_order(product)) == 'No date/time set'

    def test_formatted_value(self, make_order, product):
        order = make_order(product)
        order.update_meta(BIRTHDATETIME_ORDER_META, '1990-07-04T14:05:00+00:00')
        display = get_display_birth_datetime(order)
        assert '1990' in display
        assert display != '1990-07-04T14:05:00+00:00'

    def test_time_only_value_is_shown_raw(self, make_order, product):
        order = make_order(product)
        order.update_meta(BIRTHDATETIME_ORDER_META, '0000-00-00T14:05:00+00:00')
        assert get_display_birth_datetime(order) == '0000-00-00T14:05:00+00:00'

    def test_birth_place_default(self, make_order, product):
        assert get_birth_place(make_order(product)) == ''
