import pytest

from models.errors import NoBracketMatchError
from models.money import Money, Rate
from models.tax_brackets import (
    TaxBracket, TaxBracketTable, MONTHLY_TAX_BRACKETS, REFERENCE_TAX_BRACKETS, get_tax_brackets
)


def test_reference_table_matches_original_brackets():
    assert len(REFERENCE_TAX_BRACKETS) == 3
    assert [b.threshold for b in REFERENCE_TAX_BRACKETS] == [Money(0), Money(6000), Money(1440000)]
    assert REFERENCE_TAX_BRACKETS[1].rate == Rate("1.45")
    assert REFERENCE_TAX_BRACKETS[2].deduction == Money(16920)


def test_statutory_table_deductions_carry_accrued_tax():
    deductions = [b.deduction for b in MONTHLY_TAX_BRACKETS]
    assert deductions == [
        Money("0"), Money("-9000"), Money("-99000"), Money("-359000"),
        Money("-609000"), Money("-1209000"), Money("-2084000"),
    ]


def test_find_bracket_uses_strictly_lower_threshold():
    assert MONTHLY_TAX_BRACKETS.find_bracket(Money("0.01")).threshold == Money(0)
    # Income equal to a threshold still belongs to the lower bracket
    assert MONTHLY_TAX_BRACKETS.find_bracket(Money("300000")).threshold == Money(0)
    assert MONTHLY_TAX_BRACKETS.find_bracket(Money("300000.01")).threshold == Money(300000)
    assert MONTHLY_TAX_BRACKETS.find_bracket(Money("99999999")).threshold == Money(8000000)


def test_find_bracket_matches_descending_scan():
    """Binary search picks the same bracket as scanning from the top"""
    def scan(table, income):
        for bracket in reversed(list(table)):
            if bracket.threshold < income:
                return bracket

    for income in ["1", "5999", "6000", "6000.01", "1440000", "1440001", "50000000"]:
        assert REFERENCE_TAX_BRACKETS.find_bracket(Money(income)) == scan(REFERENCE_TAX_BRACKETS, Money(income))


def test_no_bracket_match_when_lowest_threshold_not_reached():
    table = TaxBracketTable([TaxBracket(threshold=Money(100), rate=Rate("0.1"))])
    with pytest.raises(NoBracketMatchError):
        table.find_bracket(Money(50))
    with pytest.raises(NoBracketMatchError):
        table.find_bracket(Money(100))


def test_table_validation():
    with pytest.raises(ValueError):
        TaxBracketTable([])
    with pytest.raises(ValueError):
        TaxBracketTable([
            TaxBracket(threshold=Money(0), rate=Rate("0.03")),
            TaxBracket(threshold=Money(0), rate=Rate("0.10")),
        ])


def test_get_tax_brackets():
    assert get_tax_brackets("statutory") is MONTHLY_TAX_BRACKETS
    assert get_tax_brackets("Reference") is REFERENCE_TAX_BRACKETS
    with pytest.raises(ValueError):
        get_tax_brackets("flat")
