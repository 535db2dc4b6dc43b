import pytest

from conftest import make_config
from models.errors import DivisionByZeroError, NoBracketMatchError, AmountOutOfRangeError
from models.money import Money, Hours, Rate
from models.payroll import AttendanceRecord, SpecialDeductions
from models.tax_brackets import TaxBracket, TaxBracketTable, MONTHLY_TAX_BRACKETS, REFERENCE_TAX_BRACKETS
from processors import (
    BasePayCalculator, IncomeTaxCalculator,
    compute_base_pay, compute_overtime_pay, compute_social_insurance, compute_income_tax
)


# ========== Base & Overtime Pay ==========

def test_full_attendance_earns_base_salary(config, attendance):
    assert compute_base_pay(config, attendance) == Money("800000.00")


def test_absence_is_deducted_at_hourly_rate():
    config = make_config(base_salary="870000")  # 5000 per hour
    attendance = AttendanceRecord(work_hours=Hours("174"), absence_hours=Hours("8"))
    assert compute_base_pay(config, attendance) == Money("830000.00")


def test_base_pay_linear_in_net_hours():
    config = make_config(base_salary="870000")
    single = AttendanceRecord(work_hours=Hours("100"), absence_hours=Hours("20"))
    double = AttendanceRecord(work_hours=Hours("180"), absence_hours=Hours("20"))

    assert compute_base_pay(config, double) == compute_base_pay(config, single) + compute_base_pay(config, single)


def test_zero_overtime_pays_exactly_zero(config):
    attendance = AttendanceRecord(work_hours=Hours("174"))
    assert compute_overtime_pay(config, attendance) == Money("0")
    assert str(compute_overtime_pay(config, attendance)) == "0.00"


def test_overtime_sum_rounded_once(config, attendance):
    # 800000/174 * (1 * 1.0 + 1 * 1.2) = 10114.9425...
    assert compute_overtime_pay(config, attendance) == Money("10114.94")


def test_holiday_overtime_multiplier(config):
    attendance = AttendanceRecord(work_hours=Hours("174"), overtime_holiday=Hours("2"))
    # 4597.7011... * 2 * 3.0 = 27586.2068...
    assert compute_overtime_pay(config, attendance) == Money("27586.21")


def test_half_cent_overtime_rounds_away_from_zero():
    config = make_config(base_salary="100005", full_month_hours="1000")  # 100.005 per hour
    attendance = AttendanceRecord(overtime_weekday=Hours("1"))
    assert compute_overtime_pay(config, attendance) == Money("100.01")


def test_zero_full_month_hours_raises(attendance):
    config = make_config(full_month_hours="0")
    with pytest.raises(DivisionByZeroError):
        compute_base_pay(config, attendance)
    with pytest.raises(DivisionByZeroError):
        compute_overtime_pay(config, attendance)


def test_hourly_rate_not_rounded(config):
    hourly = BasePayCalculator.hourly_rate(config)
    assert hourly != hourly.round2()


# ========== Social Insurance & Housing Fund ==========

def test_social_insurance_and_housing_fund(config):
    social_insurance, housing_fund = compute_social_insurance(config, Money("800000.00"))
    assert social_insurance == Money("264000.00")
    assert housing_fund == Money("56000.00")


def test_social_insurance_rounds_sum_not_parts():
    config = make_config(
        pension_rate=Rate("0.00005"),
        medical_rate=Rate("0.00005"),
        unemployment_rate=Rate("0"),
        housing_fund_rate=Rate("0.00005")
    )
    # Each part is 0.005; rounded separately they would total 0.02
    social_insurance, housing_fund = compute_social_insurance(config, Money("100"))
    assert social_insurance == Money("0.01")
    assert housing_fund == Money("0.01")


def test_zero_wage_base(config):
    assert compute_social_insurance(config, Money("0")) == (Money("0"), Money("0"))


# ========== Income Tax ==========

def test_tax_zero_when_deductions_cover_income():
    deductions = SpecialDeductions(housing_rent=Money("150000"), support_elderly=Money("50000"))
    assert compute_income_tax(Money("200000"), deductions) == Money("0")
    assert compute_income_tax(Money("150000"), deductions) == Money("0")


def test_non_positive_income_skips_bracket_lookup():
    table = TaxBracketTable([TaxBracket(threshold=Money(100), rate=Rate("0.1"))])
    calculator = IncomeTaxCalculator(table)
    assert calculator.calculate(Money("0"), SpecialDeductions()) == Money("0")

    with pytest.raises(NoBracketMatchError):
        calculator.calculate(Money("50"), SpecialDeductions())


def test_statutory_tax_in_second_bracket(deductions):
    # (460114.94 - 300000) * 0.10 + 9000
    assert compute_income_tax(Money("490114.94"), deductions) == Money("25011.49")


def test_reference_table_tax(deductions):
    tax = compute_income_tax(Money("490114.94"), deductions, REFERENCE_TAX_BRACKETS)
    assert tax == Money("655946.66")


def test_negative_tax_clamped_to_zero():
    # Just above 6000 the reference table's deduction exceeds the marginal tax
    assert compute_income_tax(Money("6001"), SpecialDeductions(), REFERENCE_TAX_BRACKETS) == Money("0")
    assert compute_income_tax(Money("6000"), SpecialDeductions(), REFERENCE_TAX_BRACKETS) == Money("180.00")


def test_tax_rounded_half_away_from_zero():
    # 0.5 * 0.03 = 0.015
    assert compute_income_tax(Money("0.5"), SpecialDeductions()) == Money("0.02")


def test_tax_monotonic_and_non_negative():
    previous = Money("0")
    for income in range(0, 12000000, 25000):
        tax = compute_income_tax(Money(income), SpecialDeductions())
        assert not tax.is_negative()
        assert tax >= previous
        previous = tax


def test_tax_continuous_at_bracket_boundaries():
    for bracket in list(MONTHLY_TAX_BRACKETS)[1:]:
        at_threshold = compute_income_tax(bracket.threshold, SpecialDeductions())
        just_above = compute_income_tax(bracket.threshold + Money("0.01"), SpecialDeductions())
        assert Money("0") <= just_above - at_threshold <= Money("0.01")


def test_statutory_table_applies_no_basic_exemption():
    assert compute_income_tax(Money("100000"), SpecialDeductions()) == Money("3000.00")

    # The 5000 yuan exemption is supplied through the special deductions
    with_exemption = SpecialDeductions(children_education=Money("500000"))
    assert compute_income_tax(Money("600000"), with_exemption) == Money("3000.00")


def test_oversized_salary_raises_payroll_error(attendance):
    config = make_config(base_salary="1e40")
    with pytest.raises(AmountOutOfRangeError):
        compute_base_pay(config, attendance)
