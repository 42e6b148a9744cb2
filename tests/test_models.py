import pytest
from pydantic import ValidationError

from order_service.errors import InvalidPrice, OrderError
from order_service.models import TAX_RATES, Category, Item, beer, tax_rate_for, water, whisky


@pytest.mark.parametrize(
    "factory, category, rate",
    [
        (beer, Category.BEER, 0.10),
        (whisky, Category.WHISKY, 0.20),
        (water, Category.WATER, 0.0),
    ],
)
def test_factories_set_category_and_rate(factory, category, rate):
    item = factory("Something", 50)

    assert item.category == category
    assert item.name == "Something"
    assert item.price == 50
    assert item.tax_rate == rate


def test_tax_amount_is_price_times_rate():
    assert beer("Brahma", 10).tax_amount() == pytest.approx(1.0)
    assert whisky("Jack Daniels", 100).tax_amount() == pytest.approx(20.0)
    assert water("Crystal", 1).tax_amount() == 0


def test_zero_price_is_allowed():
    item = whisky("Free sample", 0)
    assert item.price == 0
    assert item.tax_amount() == 0


def test_negative_price_rejected_with_invalid_price():
    with pytest.raises(InvalidPrice) as exc_info:
        beer("Brahma", -1)

    assert exc_info.value.price == -1
    assert exc_info.value.code == "invalid_price"
    assert isinstance(exc_info.value, OrderError)


@pytest.mark.parametrize("price", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_price_rejected_with_invalid_price(price):
    with pytest.raises(InvalidPrice):
        beer("Brahma", price)


def test_items_are_immutable():
    item = beer("Brahma", 10)
    with pytest.raises(ValidationError):
        item.price = 5
    assert item.price == 10


def test_category_accepts_plain_string():
    item = Item(category="water", name="Crystal", price=1)
    assert item.category is Category.WATER


def test_every_category_has_a_rate():
    assert set(TAX_RATES) == set(Category)
    assert tax_rate_for("whisky") == 0.20
