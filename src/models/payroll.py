from dataclasses import dataclass, fields
from typing import Dict, Iterator

from .money import Money, Hours, Rate


@dataclass(frozen=True)
class PayrollConfig:
    """Compensation parameters for one employee and policy"""
    base_salary: Money
    full_month_hours: Hours
    pension_rate: Rate
    medical_rate: Rate
    unemployment_rate: Rate
    housing_fund_rate: Rate
    overtime_weekday_rate: Rate
    overtime_weekend_rate: Rate
    overtime_holiday_rate: Rate


@dataclass(frozen=True)
class AttendanceRecord:
    """Worked, overtime and absence hours for the pay period"""
    work_hours: Hours = Hours()
    overtime_weekday: Hours = Hours()
    overtime_weekend: Hours = Hours()
    overtime_holiday: Hours = Hours()
    absence_hours: Hours = Hours()


@dataclass(frozen=True)
class SpecialDeductions:
    """Special additional deductions for individual income tax"""
    children_education: Money = Money()
    continuing_education: Money = Money()
    housing_loan_interest: Money = Money()
    housing_rent: Money = Money()
    support_elderly: Money = Money()

    def total(self) -> Money:
        return Money.total(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class PayrollResult:
    """Salary figures for one pay period.

    Iterating yields (gross, net, insurance_and_fund, income_tax).
    """
    base_pay: Money
    overtime_pay: Money
    social_insurance: Money
    housing_fund: Money
    gross: Money
    taxable_income: Money
    income_tax: Money
    net: Money
    insurance_and_fund: Money

    def __iter__(self) -> Iterator[Money]:
        return iter((self.gross, self.net, self.insurance_and_fund, self.income_tax))

    def to_dict(self) -> Dict[str, str]:
        return {f.name: str(getattr(self, f.name)) for f in fields(self)}
