"""Money value object.

Amounts are held as Decimal fixed to two places with half-up rounding.
Every binary operation requires both operands to carry the same currency.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from hr_payroll.domain.errors import CurrencyMismatchError, InvalidArgumentError

AmountLike = Union[Decimal, int, float, str]

CENTS = Decimal("0.01")
_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


def _to_decimal(value: AmountLike) -> Decimal:
    """Convert supported amount inputs to Decimal."""
    if value is None:
        raise InvalidArgumentError("Amount cannot be null")
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        # shortest repr: 0.1 -> Decimal("0.1")
        result = Decimal(str(value))
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise InvalidArgumentError(f"Invalid amount: {value!r}") from None
    else:
        raise InvalidArgumentError(f"Invalid amount: {value!r}")

    if not result.is_finite():
        raise InvalidArgumentError(f"Invalid amount: {value!r}")
    return result


def _normalize_currency(currency: str | None) -> str:
    if currency is None or not str(currency).strip():
        raise InvalidArgumentError("Currency cannot be null")
    code = str(currency).strip().upper()
    if not _CURRENCY_PATTERN.match(code):
        raise InvalidArgumentError(f"Invalid currency code: {currency!r}")
    return code


def round_money(amount: Decimal) -> Decimal:
    """Round to cents using half-up rounding."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """An immutable amount of a single currency.

    Use ``Money.of`` to build values from external input; it rejects
    negative amounts. Results of ``subtract`` are not range-checked and may
    be negative, so callers that need a floor check ``is_negative``.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", round_money(_to_decimal(self.amount)))
        object.__setattr__(self, "currency", _normalize_currency(self.currency))

    @classmethod
    def of(cls, amount: AmountLike, currency: str) -> Money:
        """Create a non-negative amount of ``currency``."""
        value = _to_decimal(amount)
        if value < 0:
            raise InvalidArgumentError("Amount cannot be negative")
        return cls(value, currency)

    @classmethod
    def zero(cls, currency: str) -> Money:
        """Additive identity for ``currency``."""
        return cls(Decimal("0"), currency)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._ensure_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        self._ensure_same_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, multiplier: AmountLike) -> Money:
        return Money(self.amount * _to_decimal(multiplier), self.currency)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, multiplier: AmountLike) -> Money:
        if isinstance(multiplier, Money):
            return NotImplemented
        return self.multiply(multiplier)

    __rmul__ = __mul__

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare_to(self, other: Money) -> int:
        """Return -1, 0 or 1 as this amount is below, equal to or above ``other``."""
        self._ensure_same_currency(other, "compare")
        if self.amount < other.amount:
            return -1
        if self.amount > other.amount:
            return 1
        return 0

    def is_greater_than(self, other: Money) -> bool:
        return self.compare_to(other) > 0

    def is_less_than(self, other: Money) -> bool:
        return self.compare_to(other) < 0

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    def _ensure_same_currency(self, other: Money, operation: str) -> None:
        if other is None:
            raise InvalidArgumentError(f"Cannot {operation} null money")
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                self.currency,
                other.currency,
                f"Cannot {operation} money with different currencies",
            )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
