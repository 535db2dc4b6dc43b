from typing import Optional

from models.money import Money
from models.payroll import SpecialDeductions
from models.tax_brackets import TaxBracketTable, MONTHLY_TAX_BRACKETS


class IncomeTaxCalculator:
    """
    Progressive individual income tax.

    Special deductions are subtracted from the taxable gross first. The
    applicable bracket is the one with the highest threshold below the
    remaining income; its deduction is subtracted after applying the
    marginal rate.
    """

    def __init__(self, brackets: Optional[TaxBracketTable] = None):
        self.brackets = brackets if brackets is not None else MONTHLY_TAX_BRACKETS

    def calculate(self, taxable_gross: Money, deductions: SpecialDeductions) -> Money:
        """Income tax for the period, rounded to 2 decimals"""
        taxable = taxable_gross - deductions.total()

        if taxable <= Money.zero():
            return Money('0.00')

        bracket = self.brackets.find_bracket(taxable)
        tax = (taxable - bracket.threshold) * bracket.rate - bracket.deduction

        if tax.is_negative():
            tax = Money.zero()

        return tax.round2()
