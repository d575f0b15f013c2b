"""Business services for the dealership application."""

from dealership.services.vehicle_service import (
    VehicleService,
    VehicleServiceError,
    VehicleValidationError,
    EmptyFieldError,
    InvalidFieldError,
    OutOfRangeError,
    DuplicateVehicleError,
    VehicleNotFoundError,
    InvalidStatusError,
    InvertedRangeError,
)

__all__ = [
    'VehicleService',
    'VehicleServiceError',
    'VehicleValidationError',
    'EmptyFieldError',
    'InvalidFieldError',
    'OutOfRangeError',
    'DuplicateVehicleError',
    'VehicleNotFoundError',
    'InvalidStatusError',
    'InvertedRangeError',
]
