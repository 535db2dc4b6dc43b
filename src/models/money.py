"""
Exact decimal value types used by the payroll calculators.

Money is expressed in minor currency units (fen/cents), Hours in elapsed
hours and Rate as a plain multiplier (0.08 = 8%). The three types wrap
``Decimal`` but do not mix: adding Money to Hours or ordering a Rate
against Money raises ``TypeError``. Only the products the payroll needs
exist (Money * Hours, Money * Rate, Money / Hours).

All arithmetic goes through ``DECIMAL_CONTEXT`` so results do not depend
on the caller's thread-local decimal context.
"""
from dataclasses import dataclass
from decimal import (
    Decimal, Context, ROUND_HALF_UP, ROUND_HALF_EVEN,
    InvalidOperation, DivisionByZero, Overflow
)
from typing import Iterable

from .errors import DivisionByZeroError, AmountOutOfRangeError

DECIMAL_CONTEXT = Context(
    prec=34,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow]
)

CENT = Decimal('0.01')


def to_decimal(value) -> Decimal:
    """Convert int, str or Decimal to a finite Decimal exactly, rejecting floats"""
    if isinstance(value, _Quantity):
        return value.amount
    if isinstance(value, float):
        raise TypeError(f"float {value!r} is not exact; pass a str or Decimal instead")
    if isinstance(value, (int, str)):
        try:
            value = Decimal(value)
        except InvalidOperation:
            raise ValueError(f"Invalid decimal value: {value!r}")
    if not isinstance(value, Decimal):
        raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")
    if not value.is_finite():
        raise ValueError(f"Decimal value must be finite, got {value}")
    return value


@dataclass(frozen=True)
class _Quantity:
    """Immutable decimal quantity; subclasses define the unit"""
    amount: Decimal = Decimal('0')

    def __post_init__(self):
        object.__setattr__(self, 'amount', to_decimal(self.amount))

    def _same_unit(self, other) -> Decimal:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        return other.amount

    def __add__(self, other):
        return type(self)(DECIMAL_CONTEXT.add(self.amount, self._same_unit(other)))

    def __sub__(self, other):
        return type(self)(DECIMAL_CONTEXT.subtract(self.amount, self._same_unit(other)))

    def __neg__(self):
        return type(self)(DECIMAL_CONTEXT.minus(self.amount))

    def __lt__(self, other):
        return self.amount < self._same_unit(other)

    def __le__(self, other):
        return self.amount <= self._same_unit(other)

    def __gt__(self, other):
        return self.amount > self._same_unit(other)

    def __ge__(self, other):
        return self.amount >= self._same_unit(other)

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_negative(self) -> bool:
        return self.amount < 0

    def __str__(self):
        return str(self.amount)


class Money(_Quantity):
    """Currency amount in minor units"""

    def __mul__(self, other):
        if isinstance(other, (Hours, Rate)):
            return Money(DECIMAL_CONTEXT.multiply(self.amount, other.amount))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Money per hour, kept at full precision"""
        if not isinstance(other, Hours):
            return NotImplemented
        if other.is_zero():
            raise DivisionByZeroError(f"Cannot divide {self} by zero hours")
        return Money(DECIMAL_CONTEXT.divide(self.amount, other.amount))

    def round2(self) -> 'Money':
        """Round to 2 decimal places, half away from zero"""
        try:
            rounded = self.amount.quantize(CENT, rounding=ROUND_HALF_UP, context=DECIMAL_CONTEXT)
        except InvalidOperation:
            raise AmountOutOfRangeError(
                f"Amount {self} exceeds {DECIMAL_CONTEXT.prec} significant digits at cent precision"
            )
        return Money(rounded)

    def to_major_units(self) -> Decimal:
        """Unrounded amount in major units (yuan/euros)"""
        return DECIMAL_CONTEXT.divide(self.amount, Decimal(100))

    @classmethod
    def zero(cls) -> 'Money':
        return cls(Decimal('0'))

    @classmethod
    def total(cls, amounts: Iterable['Money']) -> 'Money':
        result = cls.zero()
        for amount in amounts:
            result = result + amount
        return result


class Hours(_Quantity):
    """Elapsed work time in hours"""


class Rate(_Quantity):
    """Decimal fraction used as a multiplier"""
