import logging
from datetime import date, timedelta
from typing import Callable, Optional

from .config import Config
from .entities import CarCategory, Customer, Transaction
from .formatting import CurrencyFormatter, DateFormatter
from .pricing import PricingEngine, validate_age, validate_number_of_days
from .repository.base import CarRepository
from .repository.json_file import JsonFileCarRepository
from .selector import CarSelector, IndexSource
from .taxes import TaxTable, load_tax_table

logger = logging.getLogger(__name__)


class RentalService:
    """
    Books a rental: picks a car, prices it for the customer's age and
    stamps the due date.

    Args:
        selector: Chooses and resolves the car.
        pricing: Prices the rental.
        date_format: Renders the due date.
        today: Returns the current date. Injected so bookings can be replayed.
    """

    def __init__(
        self,
        selector: CarSelector,
        pricing: PricingEngine,
        date_format: Optional[DateFormatter] = None,
        today: Callable[[], date] = date.today,
    ):
        self.selector = selector
        self.pricing = pricing
        self.date_format = date_format if date_format is not None else DateFormatter()
        self.today = today

    def due_date(self, number_of_days: int) -> str:
        return self.date_format.format(self.today() + timedelta(days=number_of_days))

    async def rent(self, customer: Customer, category: CarCategory, number_of_days: int) -> Transaction:
        """
        Build the transaction for renting a car of ``category`` for ``number_of_days``.

        Any failure (bad input, unknown car, uncovered age) propagates and no
        transaction is produced.
        """
        validate_number_of_days(number_of_days)
        validate_age(customer.age)

        logger.info(f"Renting {category.name} for {number_of_days} days", extra={"customer_id": customer.id})
        car = await self.selector.select_available_car(category)
        amount = self.pricing.calculate_price(customer.age, category.base_price, number_of_days)

        transaction = Transaction(
            customer=customer,
            car=car,
            amount=amount,
            due_date=self.due_date(number_of_days),
        )
        logger.info(f"Rental priced at {amount}", extra={"customer_id": customer.id, "car_id": car.id})
        return transaction


def build_rental_service(
    config=Config,
    repository: Optional[CarRepository] = None,
    index_source: Optional[IndexSource] = None,
) -> RentalService:
    """Wire a RentalService from configuration values."""
    if repository is None:
        repository = JsonFileCarRepository(config.CARS_DATABASE)
    tax_table = load_tax_table(config.TAX_TABLE_FILE) if config.TAX_TABLE_FILE else TaxTable()

    pricing = PricingEngine(
        tax_table=tax_table,
        currency_format=CurrencyFormatter(config.RENTAL_LOCALE, config.RENTAL_CURRENCY),
    )
    return RentalService(
        selector=CarSelector(repository, index_source),
        pricing=pricing,
        date_format=DateFormatter(config.RENTAL_LOCALE),
    )
