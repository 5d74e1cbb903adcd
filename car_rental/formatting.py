from datetime import date
from decimal import Decimal

from babel import Locale
from babel.dates import format_date
from babel.numbers import format_currency


class CurrencyFormatter:
    """Formats amounts in a fixed locale and currency (e.g. ``R$ 244,40`` for pt_BR/BRL)."""

    def __init__(self, locale: str = "pt_BR", currency: str = "BRL"):
        self.locale = Locale.parse(locale)
        self.currency = currency.upper()

    def format(self, amount: Decimal) -> str:
        return format_currency(amount, self.currency, locale=self.locale)


class DateFormatter:
    """Formats dates in the long, worded form of a fixed locale (``10 de novembro de 2020``)."""

    def __init__(self, locale: str = "pt_BR"):
        self.locale = Locale.parse(locale)

    def format(self, value: date) -> str:
        return format_date(value, format="long", locale=self.locale)
