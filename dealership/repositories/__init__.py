"""Storage backends for the dealership application."""

from dealership.repositories.txt_vehicle_repository import (
    TxtVehicleRepository,
    StorageError,
    RecordNotFoundError,
)

__all__ = ['TxtVehicleRepository', 'StorageError', 'RecordNotFoundError']
