"""Utility functions for the CLI interface."""

from functools import wraps
from typing import List

import click
from tabulate import tabulate

from dealership.models.vehicle import Vehicle
from dealership.repositories.txt_vehicle_repository import TxtVehicleRepository, StorageError
from dealership.services.vehicle_service import VehicleService, VehicleServiceError

# Search bounds used when the caller does not narrow a range
YEAR_RANGE = (1886, 9999)
MILEAGE_RANGE = (0, 9999999)
PRICE_RANGE = (0.0, 9999999.0)

TABLE_HEADERS = ["Chassis Number", "Make", "Model", "Year", "Mileage", "Price", "Status"]


def with_vehicle_service(f):
    """
    Decorator that opens the inventory and passes a VehicleService as the
    first argument. Service and storage errors are reported, not raised.
    """
    @wraps(f)
    def wrapped(*args, **kwargs):
        ctx = click.get_current_context()
        inventory_file = ctx.find_root().obj["inventory_file"]
        try:
            with TxtVehicleRepository(inventory_file) as repository:
                return f(VehicleService(repository), *args, **kwargs)
        except (VehicleServiceError, StorageError) as e:
            click.echo(f"Error: {str(e)}", err=True)
            return
    return wrapped


def vehicle_rows(vehicles: List[Vehicle]) -> List[list]:
    return [
        [v.chassis_number, v.make, v.model, v.year, v.mileage, v.price, v.status]
        for v in vehicles
    ]


def echo_vehicles(vehicles: List[Vehicle], empty_message: str) -> None:
    """Print vehicles as a grid table, or a message when there are none."""
    if not vehicles:
        click.echo(empty_message)
        return
    click.echo(tabulate(vehicle_rows(vehicles), headers=TABLE_HEADERS, tablefmt="grid"))
    click.echo(f"{len(vehicles)} vehicle(s)")


def echo_vehicle(vehicle: Vehicle) -> None:
    click.echo(f"Make: {vehicle.make}")
    click.echo(f"Model: {vehicle.model}")
    click.echo(f"Year: {vehicle.year}")
    click.echo(f"Mileage: {vehicle.mileage}")
    click.echo(f"Price: {vehicle.price}")
    click.echo(f"Chassis Number: {vehicle.chassis_number}")
    click.echo(f"Status: {vehicle.status}")
