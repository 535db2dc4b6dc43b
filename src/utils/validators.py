from decimal import Decimal, InvalidOperation

from models.errors import PayrollInputError

# Leaves room for products of salary, hours and rates within 34 digits
MAX_INPUT_VALUE = Decimal('1e20')


def parse_decimal(value, field_name: str) -> Decimal:
    """Parse an input number; floats go through str() to keep their printed digits"""
    if isinstance(value, bool) or value is None:
        raise PayrollInputError(f"{field_name}: expected a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise PayrollInputError(f"{field_name}: invalid number {value!r}")
    if not result.is_finite():
        raise PayrollInputError(f"{field_name}: number must be finite, got {value!r}")
    if abs(result) >= MAX_INPUT_VALUE:
        raise PayrollInputError(f"{field_name}: number too large, got {value!r}")
    return result


def validate_non_negative(value: Decimal, field_name: str) -> Decimal:
    """Hours, rates and deduction amounts cannot be negative"""
    if value < 0:
        raise PayrollInputError(f"{field_name}: must not be negative, got {value}")
    return value
