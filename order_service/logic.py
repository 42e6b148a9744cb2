import logging
import math
from decimal import Decimal

from .errors import InvalidTemplate
from .message_source import MessageSource
from .models import Item

logger = logging.getLogger(__name__)

TOTAL_PLACEHOLDER = "{total}"
TAXES_PLACEHOLDER = "{taxes}"


def format_amount(value: float) -> str:
    """Plain decimal: 111.0 -> '111', 12.5 -> '12.5', 1e-05 -> '0.00001'. No locale, no rounding."""
    if float(value).is_integer():
        return str(int(value))
    # shortest round-trip digits, never in exponent form
    return format(Decimal(repr(float(value))), "f")


def render_message(template: str, total: float, taxes: float, language: str | None = None) -> str:
    """
    Substitutes total and taxes into a template of the form
    "<prefix>{total}<middle>{taxes}<suffix>". Everything else is kept verbatim.
    """
    for placeholder in (TOTAL_PLACEHOLDER, TAXES_PLACEHOLDER):
        count = template.count(placeholder)
        if count != 1:
            raise InvalidTemplate(f"expected exactly one {placeholder}, found {count}", language)
    if template.index(TOTAL_PLACEHOLDER) > template.index(TAXES_PLACEHOLDER):
        raise InvalidTemplate(f"{TOTAL_PLACEHOLDER} must come before {TAXES_PLACEHOLDER}", language)

    prefix, rest = template.split(TOTAL_PLACEHOLDER)
    middle, suffix = rest.split(TAXES_PLACEHOLDER)
    return f"{prefix}{format_amount(total)}{middle}{format_amount(taxes)}{suffix}"


class Order:
    """In-memory order: items are only ever appended."""

    def __init__(self, message_source: MessageSource):
        self.message_source = message_source
        self._items: list[Item] = []

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def add_item(self, item: Item) -> None:
        self._items.append(item)
        logger.debug(f"Added {item.category.value} '{item.name}' at {item.price:.2f} ({len(self._items)} items)")

    def get_total(self) -> float:
        return math.fsum(item.price for item in self._items)

    def get_taxes(self) -> float:
        return math.fsum(item.tax_amount() for item in self._items)

    async def print_message(self, language_code: str) -> str:
        # TemplateNotFound from the source is left to the caller
        template = await self.message_source.read(language_code)
        total = self.get_total()
        taxes = self.get_taxes()
        message = render_message(template, total, taxes, language_code)
        logger.info(f"Rendered '{language_code}' summary - Total: {total:.2f}, Taxes: {taxes:.2f}")
        return message
