"""Vehicle entity for the dealership inventory."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VehicleStatus(Enum):
    """Stock states a vehicle can be in."""
    IN_STOCK = "in_stock"
    SOLD = "sold"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["VehicleStatus"]:
        """Return the status matching ``value`` case-insensitively, or None."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass
class Vehicle:
    """
    Represents a used vehicle held by the gallery.

    Attributes:
        make: Vehicle manufacturer
        model: Vehicle model
        year: Model year
        mileage: Odometer reading
        price: Asking price
        chassis_number: Unique chassis number, the record's identity
        status: Either "in_stock" or "sold"
    """
    make: str
    model: str
    year: int
    mileage: int
    price: float
    chassis_number: str
    status: str
