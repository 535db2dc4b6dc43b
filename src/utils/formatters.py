from decimal import Decimal, ROUND_HALF_EVEN

from models.money import Money, Rate, CENT
from models.payroll import PayrollConfig, PayrollResult

REPORT_WIDTH = 40


def format_currency(amount: Money, symbol: str = "¥") -> str:
    """Format minor-unit amount as major units, banker's rounding"""
    major = amount.to_major_units().quantize(CENT, rounding=ROUND_HALF_EVEN)
    if major.is_zero():
        major = abs(major)
    return f"{symbol}{major:,.2f}"


def format_percentage(rate: Rate) -> str:
    """Format rate as percentage"""
    return f"{rate.amount * Decimal(100):.2f}%"


def format_salary_report(result: PayrollResult, config: PayrollConfig, symbol: str = "¥",
                         title: str = "Salary Details") -> str:
    """Plain-text salary report"""
    rows = [
        ("Base salary", config.base_salary),
        ("Overtime pay", result.overtime_pay),
        ("Gross salary", result.gross),
        ("Insurance and fund", result.insurance_and_fund),
        ("Income tax", result.income_tax),
    ]

    lines = [
        "",
        f" {title} ".center(REPORT_WIDTH + 8, "="),
        f"{'Item':<20} {'Amount':>20}",
        "-" * REPORT_WIDTH,
    ]
    for label, amount in rows:
        lines.append(f"{label:<20} {format_currency(amount, symbol):>20}")
    lines.append("-" * REPORT_WIDTH)
    lines.append(f"{'Net salary':<20} {format_currency(result.net, symbol):>20}")

    return "\n".join(lines)
