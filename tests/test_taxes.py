import unittest
from decimal import Decimal
from pathlib import Path

from car_rental.errors import NoMatchingTaxRuleError
from car_rental.taxes import DEFAULT_TAX_RULES, TaxTable, load_tax_table

MOCKS = Path(__file__).parent / "mocks"


class TestTaxTable(unittest.TestCase):
    def test_default_rules(self):
        table = TaxTable()
        self.assertEqual(table.rules, DEFAULT_TAX_RULES)
        self.assertEqual(table.rule_for(20).multiplier, Decimal("1.1"))
        self.assertEqual(table.rule_for(28).multiplier, Decimal("1.5"))
        self.assertEqual(table.rule_for(50).multiplier, Decimal("1.3"))

    def test_no_match_reports_age(self):
        with self.assertRaises(NoMatchingTaxRuleError) as ctx:
            TaxTable().rule_for(101)
        self.assertEqual(ctx.exception.age, 101)
        self.assertEqual(ctx.exception.matches, 0)

    def test_empty_table_matches_nothing(self):
        with self.assertRaises(NoMatchingTaxRuleError):
            TaxTable([]).rule_for(30)

    def test_load_from_json(self):
        table = load_tax_table(MOCKS / "tax-table.json")
        self.assertEqual(len(table), 3)
        self.assertEqual(table.rule_for(25).multiplier, Decimal("1.1"))
        self.assertEqual(table.rules, DEFAULT_TAX_RULES)


if __name__ == "__main__":
    unittest.main()
