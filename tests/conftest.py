import pytest

from models.money import Money, Hours, Rate
from models.payroll import PayrollConfig, AttendanceRecord, SpecialDeductions


def make_config(base_salary="800000", full_month_hours="174", **overrides):
    """Config with the sample employee's rates unless overridden"""
    values = dict(
        base_salary=Money(base_salary),
        full_month_hours=Hours(full_month_hours),
        pension_rate=Rate("0.08"),
        medical_rate=Rate("0.20"),
        unemployment_rate=Rate("0.05"),
        housing_fund_rate=Rate("0.07"),
        overtime_weekday_rate=Rate("1.0"),
        overtime_weekend_rate=Rate("1.2"),
        overtime_holiday_rate=Rate("3.0"),
    )
    values.update(overrides)
    return PayrollConfig(**values)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def attendance():
    return AttendanceRecord(
        work_hours=Hours("174"),
        overtime_weekday=Hours("1"),
        overtime_weekend=Hours("1"),
        overtime_holiday=Hours("0"),
        absence_hours=Hours("0")
    )


@pytest.fixture
def deductions():
    return SpecialDeductions(
        housing_loan_interest=Money("10000"),
        support_elderly=Money("20000")
    )
