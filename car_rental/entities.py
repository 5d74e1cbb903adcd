from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    age: int = Field(ge=0)


class Car(BaseModel):
    """A rentable car. Only ``id`` matters to the workflow; the rest is passed through."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str
    name: Optional[str] = None
    release_year: Optional[int] = Field(default=None, alias="releaseYear")
    available: bool = True
    gas_available: bool = Field(default=True, alias="gasAvailable")


class CarCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    base_price: Decimal = Field(
        ge=0, validation_alias=AliasChoices("base_price", "basePrice", "price")
    )
    car_ids: Tuple[str, ...] = Field(validation_alias=AliasChoices("car_ids", "carIds"))


class TaxRule(BaseModel):
    """Price multiplier for customers whose age is within [from, to], both inclusive."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_age: int = Field(alias="from", ge=0)
    to_age: int = Field(alias="to", ge=0)
    multiplier: Decimal = Field(gt=0, validation_alias=AliasChoices("multiplier", "then"))

    @model_validator(mode="after")
    def check_range(self) -> "TaxRule":
        if self.from_age > self.to_age:
            raise ValueError(f"Invalid age range: {self.from_age} > {self.to_age}")
        return self

    def covers(self, age: int) -> bool:
        return self.from_age <= age <= self.to_age


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer: Customer
    car: Car
    amount: str
    due_date: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
