from decimal import Decimal
from pathlib import Path
from typing import Iterable, Tuple, Union

from .entities import TaxRule
from .errors import NoMatchingTaxRuleError
from .repository.json_file import read_json_list

# Multipliers applied to the category price by customer age bracket.
DEFAULT_TAX_RULES: Tuple[TaxRule, ...] = (
    TaxRule(from_age=18, to_age=25, multiplier=Decimal("1.1")),
    TaxRule(from_age=26, to_age=30, multiplier=Decimal("1.5")),
    TaxRule(from_age=31, to_age=100, multiplier=Decimal("1.3")),
)


class TaxTable:
    """Ordered, read-only set of age brackets supplied at construction."""

    def __init__(self, rules: Iterable[TaxRule] = DEFAULT_TAX_RULES):
        self.rules: Tuple[TaxRule, ...] = tuple(rules)

    def __len__(self) -> int:
        return len(self.rules)

    def rule_for(self, age: int) -> TaxRule:
        """
        Return the single rule covering ``age``.

        Raises:
            NoMatchingTaxRuleError: If no rule, or more than one rule, covers the age.
        """
        matches = [rule for rule in self.rules if rule.covers(age)]
        if len(matches) != 1:
            raise NoMatchingTaxRuleError(age, matches=len(matches))
        return matches[0]


def load_tax_table(path: Union[str, Path]) -> TaxTable:
    """Load a tax table from a JSON list of ``{"from", "to", "then"}`` objects."""
    return TaxTable(TaxRule.model_validate(record) for record in read_json_list(path))
