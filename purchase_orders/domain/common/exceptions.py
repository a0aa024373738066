"""
Errors raised by value objects and aggregates when a rule is broken.

They are raised at the point of violation, never caught inside the
domain. Use cases catch them at their boundary and translate them into
``validation`` application errors.

Every exception carries a ``code`` discriminant so callers can tell
the kinds apart without importing the classes.
"""


class DomainError(Exception):
    """Root of the domain error hierarchy; ``details`` holds structured context."""

    code = "domain_error"

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidAmountError(DomainError):
    """
    Raised when a monetary amount or scale factor is unusable.

    Example: negative amount, NaN, infinity, zero multiplier.
    """

    code = "invalid_amount"

    def __init__(self, amount: object) -> None:
        super().__init__(f"Invalid amount: {amount}", {"amount": str(amount)})
        self.amount = amount


class InvalidCurrencyError(DomainError):
    """Raised when a currency code is not a three-letter code."""

    code = "invalid_currency"

    def __init__(self, currency: object) -> None:
        super().__init__(f"Invalid currency: {currency!r}", {"currency": str(currency)})
        self.currency = currency


class CurrencyMismatchError(DomainError):
    """
    Raised when two monetary values in different currencies are combined.

    Example: adding EUR to USD, or adding a EUR item to a USD order.
    """

    code = "currency_mismatch"

    def __init__(self, expected: str, got: str) -> None:
        super().__init__(
            f"Currency mismatch. Expected: {expected}. Got: {got}",
            {"expected": expected, "got": got},
        )
        self.expected = expected
        self.got = got


class InvalidIdentifierError(DomainError):
    """Raised when an identifier is empty or too short after trimming."""

    code = "invalid_identifier"

    def __init__(self, value: object, label: str) -> None:
        super().__init__(
            f'Invalid identifier for {label}: "{value}"',
            {"label": label, "value": str(value)},
        )
        self.value = value
        self.label = label


class InvalidQuantityError(DomainError):
    """Raised when a line item quantity is not a positive integer."""

    code = "invalid_quantity"

    def __init__(self, quantity: object) -> None:
        super().__init__(f"Invalid quantity: {quantity}", {"quantity": str(quantity)})
        self.quantity = quantity


class InvariantViolationError(DomainError):
    """
    Raised when state loaded into an aggregate breaks one of its rules,
    e.g. an order holding two lines for the same product.
    """

    code = "invariant_violation"

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(
            f"{aggregate} invariant broken: {invariant}",
            {"aggregate": aggregate, "invariant": invariant},
        )
        self.aggregate = aggregate
        self.invariant = invariant

