"""Entity models for the dealership application."""
from dealership.models.vehicle import Vehicle, VehicleStatus


__all__ = [
    'Vehicle',
    'VehicleStatus',
]
