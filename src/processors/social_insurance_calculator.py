from typing import Tuple

from models.money import Money
from models.payroll import PayrollConfig


class SocialInsuranceCalculator:
    """Employee social insurance and housing fund withholding"""

    def calculate(self, config: PayrollConfig, wage_base: Money) -> Tuple[Money, Money]:
        """Return (social_insurance, housing_fund) for the wage base.

        Social insurance is pension + medical + unemployment, rounded once
        after summing. The housing fund is rounded on its own.
        """
        pension = wage_base * config.pension_rate
        medical = wage_base * config.medical_rate
        unemployment = wage_base * config.unemployment_rate

        housing_fund = (wage_base * config.housing_fund_rate).round2()
        social_insurance = (pension + medical + unemployment).round2()

        return social_insurance, housing_fund
