from typing import Optional, Tuple

from models.money import Money
from models.payroll import PayrollConfig, AttendanceRecord, SpecialDeductions, PayrollResult
from models.tax_brackets import TaxBracketTable
from .base_pay_calculator import BasePayCalculator
from .social_insurance_calculator import SocialInsuranceCalculator
from .income_tax_calculator import IncomeTaxCalculator
from .net_salary_calculator import NetSalaryCalculator
from .payslip_generator import PayslipGenerator


def compute_base_pay(config: PayrollConfig, attendance: AttendanceRecord) -> Money:
    return BasePayCalculator().calculate_base_pay(config, attendance)


def compute_overtime_pay(config: PayrollConfig, attendance: AttendanceRecord) -> Money:
    return BasePayCalculator().calculate_overtime_pay(config, attendance)


def compute_social_insurance(config: PayrollConfig, wage_base: Money) -> Tuple[Money, Money]:
    return SocialInsuranceCalculator().calculate(config, wage_base)


def compute_income_tax(taxable_income: Money, deductions: SpecialDeductions,
                       brackets: Optional[TaxBracketTable] = None) -> Money:
    return IncomeTaxCalculator(brackets).calculate(taxable_income, deductions)


def compute_net_salary(config: PayrollConfig, attendance: AttendanceRecord,
                       deductions: SpecialDeductions,
                       brackets: Optional[TaxBracketTable] = None) -> PayrollResult:
    return NetSalaryCalculator(brackets).calculate(config, attendance, deductions)


__all__ = [
    'BasePayCalculator',
    'SocialInsuranceCalculator',
    'IncomeTaxCalculator',
    'NetSalaryCalculator',
    'PayslipGenerator',
    'compute_base_pay',
    'compute_overtime_pay',
    'compute_social_insurance',
    'compute_income_tax',
    'compute_net_salary'
]
