from .errors import (
    PayrollError, DivisionByZeroError, NoBracketMatchError, PayrollInputError, AmountOutOfRangeError
)
from .money import Money, Hours, Rate
from .payroll import PayrollConfig, AttendanceRecord, SpecialDeductions, PayrollResult
from .tax_brackets import (
    TaxBracket,
    TaxBracketTable,
    MONTHLY_TAX_BRACKETS,
    REFERENCE_TAX_BRACKETS,
    get_tax_brackets
)

__all__ = [
    'PayrollError',
    'DivisionByZeroError',
    'NoBracketMatchError',
    'PayrollInputError',
    'AmountOutOfRangeError',
    'Money',
    'Hours',
    'Rate',
    'PayrollConfig',
    'AttendanceRecord',
    'SpecialDeductions',
    'PayrollResult',
    'TaxBracket',
    'TaxBracketTable',
    'MONTHLY_TAX_BRACKETS',
    'REFERENCE_TAX_BRACKETS',
    'get_tax_brackets'
]
