import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from .errors import InvalidArgumentError
from .formatting import CurrencyFormatter
from .taxes import TaxTable

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def validate_age(age: int):
    if isinstance(age, bool) or not isinstance(age, int) or age < 0:
        raise InvalidArgumentError(f"Customer age must be a non-negative integer, got {age!r}")


def validate_number_of_days(number_of_days: int):
    if isinstance(number_of_days, bool) or not isinstance(number_of_days, int) or number_of_days <= 0:
        raise InvalidArgumentError(f"Number of days must be a positive integer, got {number_of_days!r}")


def parse_base_price(base_price) -> Decimal:
    """Convert a category price to Decimal, rejecting non-numeric, non-finite and negative values."""
    if isinstance(base_price, bool):
        raise InvalidArgumentError(f"Base price must be a number, got {base_price!r}")
    try:
        # str() keeps float inputs like 37.6 from dragging binary noise into the total
        price = Decimal(str(base_price))
    except InvalidOperation:
        raise InvalidArgumentError(f"Base price must be a number, got {base_price!r}") from None
    if not price.is_finite() or price < 0:
        raise InvalidArgumentError(f"Base price must be a finite non-negative number, got {base_price!r}")
    return price


class PricingEngine:
    """
    Computes the rental price for a customer age, category price and duration.

    The engine owns its tax table and currency formatter; both are fixed at
    construction, so ``calculate_price`` is deterministic and free of I/O.
    """

    def __init__(self, tax_table: Optional[TaxTable] = None, currency_format: Optional[CurrencyFormatter] = None):
        self.tax_table = tax_table if tax_table is not None else TaxTable()
        self.currency_format = currency_format if currency_format is not None else CurrencyFormatter()

    def final_price(self, customer_age: int, base_price: Union[Decimal, int, float, str], number_of_days: int) -> Decimal:
        """
        Return ``multiplier * base_price * number_of_days`` rounded to cents.

        Raises:
            InvalidArgumentError: Malformed age or price, or non-positive number of days.
            NoMatchingTaxRuleError: The tax table does not cover the age exactly once.
        """
        validate_age(customer_age)
        validate_number_of_days(number_of_days)
        price = parse_base_price(base_price)

        rule = self.tax_table.rule_for(customer_age)
        total = (rule.multiplier * price * number_of_days).quantize(CENTS, rounding=ROUND_HALF_UP)
        logger.debug(f"Priced age {customer_age} x{rule.multiplier} over {number_of_days} days: {total}")
        return total

    def calculate_price(self, customer_age: int, base_price: Union[Decimal, int, float, str], number_of_days: int) -> str:
        """Return the final price formatted in the engine's locale and currency."""
        return self.currency_format.format(self.final_price(customer_age, base_price, number_of_days))
