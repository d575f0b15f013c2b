"""Read-only inventory commands shared by employees and customers."""

import click

from dealership.cli_module.utils import (
    with_vehicle_service, echo_vehicles, YEAR_RANGE, MILEAGE_RANGE, PRICE_RANGE,
)


@click.command(name="list")
@with_vehicle_service
def list_command(service):
    """View all vehicles."""
    echo_vehicles(service.get_all_vehicles(), "No vehicles available.")


@click.command(name="search")
@click.option("--make", default="", help="Manufacturer (case-insensitive)")
@click.option("--model", default="", help="Model (case-insensitive)")
@click.option("--min-year", type=int, default=YEAR_RANGE[0], help="Earliest model year")
@click.option("--max-year", type=int, default=YEAR_RANGE[1], help="Latest model year")
@click.option("--min-mileage", type=int, default=MILEAGE_RANGE[0], help="Lowest mileage")
@click.option("--max-mileage", type=int, default=MILEAGE_RANGE[1], help="Highest mileage")
@click.option("--min-price", type=float, default=PRICE_RANGE[0], help="Lowest price")
@click.option("--max-price", type=float, default=PRICE_RANGE[1], help="Highest price")
@click.option("--status", default="", help="in_stock or sold")
@with_vehicle_service
def search_command(service, make, model, min_year, max_year, min_mileage, max_mileage,
                   min_price, max_price, status):
    """Search vehicles by make, model, ranges and status."""
    results = service.search_vehicles(
        make, model, min_year, max_year, min_mileage, max_mileage,
        min_price, max_price, status)
    echo_vehicles(results, "No matching vehicles found.")
