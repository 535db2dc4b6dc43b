"""
Progressive income tax bracket tables.

Tax for an income inside a bracket is
``(income - threshold) * rate - deduction``. Tables are immutable and
built once at import; the calculators only read them.
"""
from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from .errors import NoBracketMatchError
from .money import Money, Rate


@dataclass(frozen=True)
class TaxBracket:
    """Single bracket: threshold, marginal rate and deduction (minor units)"""
    threshold: Money
    rate: Rate
    deduction: Money = Money()


class TaxBracketTable:
    """Ordered, read-only list of tax brackets, ascending by threshold"""

    def __init__(self, brackets: Iterable[TaxBracket]):
        self._brackets: Tuple[TaxBracket, ...] = tuple(brackets)

        if not self._brackets:
            raise ValueError("Tax bracket table must contain at least one bracket")

        for lower, upper in zip(self._brackets, self._brackets[1:]):
            if not lower.threshold < upper.threshold:
                raise ValueError(
                    f"Bracket thresholds must be strictly increasing "
                    f"({lower.threshold} >= {upper.threshold})"
                )

        self._thresholds = tuple(b.threshold.amount for b in self._brackets)

    @classmethod
    def from_marginal_rates(cls, rates: Sequence[Tuple[Money, Rate]]) -> 'TaxBracketTable':
        """Build a table from (threshold, marginal rate) pairs.

        Each bracket's deduction is the negated tax accrued below its
        threshold, so tax is continuous across bracket boundaries.
        """
        brackets = []
        accrued = Money.zero()
        previous = None

        for threshold, rate in rates:
            if previous is not None:
                accrued = accrued + (threshold - previous.threshold) * previous.rate
            bracket = TaxBracket(threshold=threshold, rate=rate, deduction=-accrued)
            brackets.append(bracket)
            previous = bracket

        return cls(brackets)

    def find_bracket(self, income: Money) -> TaxBracket:
        """Return the highest bracket whose threshold is below income"""
        # Index of the first threshold >= income; the bracket before it applies
        index = bisect_left(self._thresholds, income.amount)
        if index == 0:
            raise NoBracketMatchError(
                f"No tax bracket applies to taxable income {income} "
                f"(lowest threshold is {self._brackets[0].threshold})"
            )
        return self._brackets[index - 1]

    def __iter__(self) -> Iterator[TaxBracket]:
        return iter(self._brackets)

    def __len__(self) -> int:
        return len(self._brackets)

    def __getitem__(self, index: int) -> TaxBracket:
        return self._brackets[index]

    def __repr__(self):
        return f"<TaxBracketTable(brackets={len(self._brackets)})>"


# Simplified table carried over from the first version of the calculator
REFERENCE_TAX_BRACKETS = TaxBracketTable([
    TaxBracket(threshold=Money(0), rate=Rate('0.03'), deduction=Money(0)),
    TaxBracket(threshold=Money(6000), rate=Rate('1.45'), deduction=Money(2520)),
    TaxBracket(threshold=Money(1440000), rate=Rate('0.80'), deduction=Money(16920)),
])

# Monthly comprehensive income rates, thresholds in fen. The thresholds apply
# to taxable income exactly as passed in: no basic exemption (the 5000 yuan
# 起征点) is subtracted here, so callers that need it add 500000 to the
# special deductions.
MONTHLY_TAX_BRACKETS = TaxBracketTable.from_marginal_rates([
    (Money(0), Rate('0.03')),
    (Money(300000), Rate('0.10')),
    (Money(1200000), Rate('0.20')),
    (Money(2500000), Rate('0.25')),
    (Money(3500000), Rate('0.30')),
    (Money(5500000), Rate('0.35')),
    (Money(8000000), Rate('0.45')),
])

TAX_BRACKET_TABLES = {
    'statutory': MONTHLY_TAX_BRACKETS,
    'reference': REFERENCE_TAX_BRACKETS,
}


def get_tax_brackets(name: str) -> TaxBracketTable:
    """Look up a bracket table by name ('statutory' or 'reference')"""
    try:
        return TAX_BRACKET_TABLES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown tax table '{name}'. Available: {', '.join(sorted(TAX_BRACKET_TABLES))}"
        )
