"""
Money value object.

Amounts are kept as ``Decimal`` quantized to cents with half-up rounding,
so arithmetic never drifts the way binary floats do.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self

from purchase_orders.domain.common.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidCurrencyError,
)
from purchase_orders.domain.common.value_object import ValueObject

_CENTS = Decimal("0.01")
_CURRENCY_CODE = re.compile(r"[A-Z]{3}")

AmountLike = Decimal | int | float | str


def normalize_currency(currency: object) -> str:
    """
    Normalize a currency code to its upper-case three-letter form.

    Raises:
        InvalidCurrencyError: If the code is not three ASCII letters
    """
    if not isinstance(currency, str):
        raise InvalidCurrencyError(currency)
    code = currency.strip().upper()
    if not _CURRENCY_CODE.fullmatch(code):
        raise InvalidCurrencyError(currency)
    return code


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # repr() yields the shortest round-tripping form: 0.1 -> "0.1"
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as err:
            raise InvalidAmountError(value) from err
    raise InvalidAmountError(value)


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Immutable, currency-tagged amount.

    Business Rules:
    - Amount is finite and never negative
    - Amount always carries exactly two decimal places
    - Arithmetic is only defined between amounts of the same currency
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        amount = _to_decimal(self.amount)
        if not amount.is_finite() or amount < 0:
            raise InvalidAmountError(self.amount)
        try:
            quantized = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation as err:
            raise InvalidAmountError(self.amount) from err
        if quantized.is_zero():
            quantized = abs(quantized)
        self._normalize("amount", quantized)
        self._normalize("currency", normalize_currency(self.currency))

    @classmethod
    def of(cls, amount: AmountLike, currency: str) -> Self:
        """
        Create a Money value.

        Args:
            amount: Non-negative finite amount
            currency: Three-letter currency code (case-insensitive)

        Raises:
            InvalidAmountError: If amount is negative, NaN or infinite
            InvalidCurrencyError: If the currency code is malformed
        """
        return cls(amount, currency)  # type: ignore[arg-type]

    @classmethod
    def zero(cls, currency: str) -> Self:
        return cls(Decimal(0), currency)

    def add(self, other: "Money") -> "Money":
        """Return the sum of both amounts in the shared currency."""
        self._ensure_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: AmountLike) -> "Money":
        """
        Scale the amount by a strictly positive finite factor.

        Raises:
            InvalidAmountError: If factor is non-finite or not above zero
        """
        value = _to_decimal(factor)
        if not value.is_finite() or value <= 0:
            raise InvalidAmountError(factor)
        return Money(self.amount * value, self.currency)

    def _ensure_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
