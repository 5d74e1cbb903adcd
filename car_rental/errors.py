class RentalError(Exception):
    """Base class for every error raised by the rental workflow."""


class NotFoundError(RentalError, LookupError):
    """A car identifier could not be resolved by the repository."""

    def __init__(self, car_id: str):
        self.car_id = car_id
        super().__init__(f"Car not found: {car_id}")


class NoMatchingTaxRuleError(RentalError):
    """Zero or several tax rules cover a customer's age."""

    def __init__(self, age: int, matches: int = 0):
        self.age = age
        self.matches = matches
        if matches:
            message = f"{matches} tax rules match age {age}; expected exactly one"
        else:
            message = f"No tax rule matches age {age}"
        super().__init__(message)


class InvalidArgumentError(RentalError, ValueError):
    """An input to the rental workflow is out of range or malformed."""


class CategoryNotFoundError(RentalError, LookupError):
    """A category identifier is not present in the category database."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")
