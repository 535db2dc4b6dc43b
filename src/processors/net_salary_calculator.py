import logging
from typing import Optional

from models.payroll import PayrollConfig, AttendanceRecord, SpecialDeductions, PayrollResult
from models.tax_brackets import TaxBracketTable
from .base_pay_calculator import BasePayCalculator
from .social_insurance_calculator import SocialInsuranceCalculator
from .income_tax_calculator import IncomeTaxCalculator

logger = logging.getLogger(__name__)


class NetSalaryCalculator:
    """Assemble gross pay, withholdings, income tax and net pay"""

    def __init__(self, brackets: Optional[TaxBracketTable] = None):
        self.pay_calculator = BasePayCalculator()
        self.insurance_calculator = SocialInsuranceCalculator()
        self.tax_calculator = IncomeTaxCalculator(brackets)

    def calculate(self, config: PayrollConfig, attendance: AttendanceRecord,
                  deductions: SpecialDeductions) -> PayrollResult:
        """Calculate all salary figures for one employee and pay period"""

        base_pay = self.pay_calculator.calculate_base_pay(config, attendance)
        overtime_pay = self.pay_calculator.calculate_overtime_pay(config, attendance)

        # Contributions are levied on base pay only, overtime is excluded
        social_insurance, housing_fund = self.insurance_calculator.calculate(config, base_pay)

        gross = base_pay + overtime_pay
        taxable_income = gross - social_insurance - housing_fund
        income_tax = self.tax_calculator.calculate(taxable_income, deductions)

        net = gross - social_insurance - housing_fund - income_tax
        insurance_and_fund = social_insurance + housing_fund

        logger.debug(
            "Payroll calculated: base=%s overtime=%s gross=%s insurance=%s fund=%s tax=%s net=%s",
            base_pay, overtime_pay, gross, social_insurance, housing_fund, income_tax, net
        )

        return PayrollResult(
            base_pay=base_pay,
            overtime_pay=overtime_pay,
            social_insurance=social_insurance,
            housing_fund=housing_fund,
            gross=gross,
            taxable_income=taxable_income,
            income_tax=income_tax,
            net=net,
            insurance_and_fund=insurance_and_fund
        )
