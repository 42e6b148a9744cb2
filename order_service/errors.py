class OrderError(Exception):
    """
    Base class for errors raised while building or summarizing an order.

    These are caller errors (bad input, missing template), not crashes,
    and are propagated as-is to whoever triggered them.
    """

    code: str = "order_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidPrice(OrderError):
    """Raised when an item is constructed with a negative price."""

    code = "invalid_price"

    def __init__(self, price: float) -> None:
        super().__init__(f"Item price must be non-negative, got {price}")
        self.price = price


class TemplateNotFound(OrderError):
    """Raised when no message template exists for a language code."""

    code = "template_not_found"

    def __init__(self, language: str) -> None:
        super().__init__(f"No message template for language '{language}'")
        self.language = language


class InvalidTemplate(OrderError):
    """Raised when a template lacks the {total}/{taxes} placeholders in order."""

    code = "invalid_template"

    def __init__(self, reason: str, language: str | None = None) -> None:
        prefix = f"Template '{language}': " if language else "Template: "
        super().__init__(prefix + reason)
        self.language = language
