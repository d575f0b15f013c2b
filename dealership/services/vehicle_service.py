"""Vehicle service for the dealership application."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from dealership.models.vehicle import Vehicle, VehicleStatus
from dealership.repositories.txt_vehicle_repository import RecordNotFoundError

logger = logging.getLogger(__name__)

MIN_YEAR = 1886
MAX_INSERT_YEAR = 9999
MAX_INSERT_MILEAGE = 9999999
MAX_UPDATE_MILEAGE = 999999
MAX_PRICE = 9999999

# Characters that would corrupt the comma-delimited inventory file
FORBIDDEN_CHARACTERS = (",", "\n", "\r")


class VehicleServiceError(Exception):
    """Custom exception for vehicle service errors."""
    pass


class VehicleValidationError(VehicleServiceError):
    """Raised when input breaks a business rule. Correct the input and retry."""
    pass


class EmptyFieldError(VehicleValidationError):
    """A required value is missing or blank."""
    pass


class InvalidFieldError(VehicleValidationError):
    """A text value contains a character the inventory file cannot store."""
    pass


class OutOfRangeError(VehicleValidationError):
    """A year, mileage or price lies outside its allowed bounds."""
    pass


class DuplicateVehicleError(VehicleValidationError):
    """The chassis number is already in the inventory."""
    pass


class VehicleNotFoundError(VehicleValidationError):
    """No vehicle has the given chassis number."""
    pass


class InvalidStatusError(VehicleValidationError):
    """The status is not in_stock or sold."""
    pass


class InvertedRangeError(VehicleValidationError):
    """A search lower bound exceeds its upper bound."""
    pass


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _require_text(value: Optional[str], label: str) -> None:
    if _is_blank(value):
        raise EmptyFieldError(f"{label} cannot be null or empty")
    if any(c in value for c in FORBIDDEN_CHARACTERS):
        raise InvalidFieldError(f"{label} cannot contain commas or line breaks")


def _normalize(vehicle: Vehicle, status: VehicleStatus) -> Vehicle:
    return replace(
        vehicle,
        make=vehicle.make.strip(),
        model=vehicle.model.strip(),
        chassis_number=vehicle.chassis_number.strip(),
        status=status.value,
    )


def _parse_status(status: Optional[str]) -> VehicleStatus:
    parsed = VehicleStatus.parse(status)
    if parsed is None:
        raise InvalidStatusError("Status must be either 'in_stock' or 'sold'")
    return parsed


class VehicleService:
    """Business rules guarding the vehicle repository."""

    def __init__(self, repository):
        self.repository = repository

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """
        Validate and store a new vehicle.

        Args:
            vehicle: Vehicle to add

        Returns:
            Vehicle: The stored, normalized vehicle

        Raises:
            VehicleValidationError: If any field breaks a rule or the chassis
                number is already in use
            StorageError: If the inventory file cannot be accessed
        """
        if vehicle is None:
            raise EmptyFieldError("Vehicle cannot be null")
        _require_text(vehicle.chassis_number, "Chassis number")
        _require_text(vehicle.make, "Make")
        _require_text(vehicle.model, "Model")

        if not MIN_YEAR <= vehicle.year <= MAX_INSERT_YEAR:
            raise OutOfRangeError(
                f"Year must be a positive integer greater than {MIN_YEAR - 1} "
                f"and less than or equal to {MAX_INSERT_YEAR}")
        if not 0 <= vehicle.mileage <= MAX_INSERT_MILEAGE:
            raise OutOfRangeError(f"Mileage cannot be negative or exceed {MAX_INSERT_MILEAGE}")
        if not 0 <= vehicle.price <= MAX_PRICE:
            raise OutOfRangeError(f"price cannot be less than 0 or greater than {MAX_PRICE}")

        with self.repository.lock:
            chassis_number = vehicle.chassis_number.strip()
            if self.repository.find_by_chassis_number(chassis_number) is not None:
                raise DuplicateVehicleError(
                    f"A Vehicle with chassis number {chassis_number} already exists")

            status = _parse_status(vehicle.status)
            saved = _normalize(vehicle, status)
            self.repository.save(saved)

        logger.info(f"Added vehicle {saved.chassis_number}")
        return saved

    def update_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """
        Replace a stored vehicle with new values.

        The whole record is replaced; callers merge unchanged fields first.
        The year may not be later than the current calendar year and the
        mileage cap is lower than on insert.

        Returns:
            Vehicle: The stored, normalized vehicle
        """
        if vehicle is None:
            raise EmptyFieldError("Vehicle cannot be null")
        if _is_blank(vehicle.chassis_number):
            raise EmptyFieldError("Chassis number cannot be null or empty")

        current_year = datetime.now().year

        with self.repository.lock:
            chassis_number = vehicle.chassis_number.strip()
            if self.repository.find_by_chassis_number(chassis_number) is None:
                raise VehicleNotFoundError(
                    f"Vehicle with chassis number {chassis_number} does not exist")

            _require_text(vehicle.make, "Make")
            _require_text(vehicle.model, "Model")
            if not MIN_YEAR <= vehicle.year <= current_year:
                raise OutOfRangeError(
                    f"Year must be between {MIN_YEAR} and {current_year}")
            if not 0 <= vehicle.mileage <= MAX_UPDATE_MILEAGE:
                raise OutOfRangeError(f"Mileage cannot be negative or exceed {MAX_UPDATE_MILEAGE:,}")
            if _is_blank(vehicle.status):
                raise InvalidStatusError("Status cannot be null or empty")
            status = _parse_status(vehicle.status)
            if not 0 <= vehicle.price <= MAX_PRICE:
                raise OutOfRangeError(f"price must be between 0 and {MAX_PRICE}")

            saved = _normalize(vehicle, status)
            try:
                self.repository.update(saved)
            except RecordNotFoundError as e:
                raise VehicleNotFoundError(str(e))

        logger.info(f"Updated vehicle {saved.chassis_number}")
        return saved

    def delete_vehicle(self, chassis_number: str) -> None:
        """Delete the vehicle with the given chassis number."""
        if _is_blank(chassis_number):
            raise EmptyFieldError("chassis number cannot be null or empty")

        with self.repository.lock:
            chassis_number = chassis_number.strip()
            if self.repository.find_by_chassis_number(chassis_number) is None:
                raise VehicleNotFoundError(f"No vehicle found with chassis number: {chassis_number}")
            self.repository.delete(chassis_number)

        logger.info(f"Deleted vehicle {chassis_number}")

    def get_vehicle_by_chassis_number(self, chassis_number: str) -> Vehicle:
        if _is_blank(chassis_number):
            raise EmptyFieldError("chassis number cannot be null or empty")

        vehicle = self.repository.find_by_chassis_number(chassis_number.strip())
        if vehicle is None:
            raise VehicleNotFoundError(f"No vehicle found with chassis number: {chassis_number}")
        return vehicle

    def get_all_vehicles(self) -> List[Vehicle]:
        return self.repository.find_all()

    def search_vehicles(self, make: Optional[str], model: Optional[str],
                        min_year: int, max_year: int,
                        min_mileage: int, max_mileage: int,
                        min_price: float, max_price: float,
                        status: Optional[str] = None) -> List[Vehicle]:
        """
        Search the inventory.

        Args:
            make: Manufacturer to match case-insensitively, blank for any
            model: Model to match case-insensitively, blank for any
            min_year, max_year: Inclusive year bounds
            min_mileage, max_mileage: Inclusive mileage bounds
            min_price, max_price: Inclusive price bounds
            status: "in_stock" or "sold" in any case, blank for any

        Returns:
            List[Vehicle]: Matching vehicles in file order

        Raises:
            InvertedRangeError: If a lower bound exceeds its upper bound
            InvalidStatusError: If status is given but not recognised
        """
        if not min_year <= max_year:
            raise InvertedRangeError("minYear cannot be greater than maxYear")
        if not min_mileage <= max_mileage:
            raise InvertedRangeError("minMileage cannot be greater than maxMileage")
        if not min_price <= max_price:
            raise InvertedRangeError("minPrice cannot be greater than maxPrice")
        if not _is_blank(status) and VehicleStatus.parse(status) is None:
            raise InvalidStatusError("Status must be 'in_stock' or 'sold'")

        return self.repository.find_by_filter(
            make, model, min_year, max_year, min_mileage, max_mileage,
            min_price, max_price, status)
