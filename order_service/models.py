import math
from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator

from .errors import InvalidPrice


class Category(str, Enum):
    BEER = "beer"
    WHISKY = "whisky"
    WATER = "water"


# Fixed tax rate per category (fraction of the price)
TAX_RATES = {
    Category.BEER: 0.10,
    Category.WHISKY: 0.20,
    Category.WATER: 0.0,
}


def tax_rate_for(category: Category) -> float:
    return TAX_RATES[Category(category)]


class Item(BaseModel):
    """One purchasable unit. Its tax rate is decided by the category alone."""
    model_config = ConfigDict(frozen=True)

    category: Category
    name: str
    price: float

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, value: float) -> float:
        # InvalidPrice is not a ValueError, so pydantic lets it through unwrapped
        # NaN and inf are not prices either
        if not math.isfinite(value) or value < 0:
            raise InvalidPrice(value)
        return value

    @property
    def tax_rate(self) -> float:
        return tax_rate_for(self.category)

    def tax_amount(self) -> float:
        return self.price * self.tax_rate


def beer(name: str, price: float) -> Item:
    return Item(category=Category.BEER, name=name, price=price)


def whisky(name: str, price: float) -> Item:
    return Item(category=Category.WHISKY, name=name, price=price)


def water(name: str, price: float) -> Item:
    return Item(category=Category.WATER, name=name, price=price)
