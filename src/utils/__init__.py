from .formatters import format_currency, format_percentage, format_salary_report
from .validators import parse_decimal, validate_non_negative

__all__ = [
    'format_currency',
    'format_percentage',
    'format_salary_report',
    'parse_decimal',
    'validate_non_negative'
]
