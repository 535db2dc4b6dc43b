class PayrollError(Exception):
    """Base class for payroll calculation errors"""


class DivisionByZeroError(PayrollError, ZeroDivisionError):
    """Raised when the hourly rate divisor (full month hours) is zero"""


class NoBracketMatchError(PayrollError, LookupError):
    """Raised when positive taxable income falls below every bracket threshold"""


class PayrollInputError(PayrollError, ValueError):
    """Raised when payroll input data is missing or invalid"""


class AmountOutOfRangeError(PayrollError, ArithmeticError):
    """Raised when an amount is too large to round at cent precision"""
