"""Gallery employee commands for the dealership CLI."""

import click

from dealership.models.vehicle import Vehicle, VehicleStatus
from dealership.cli_module.utils import with_vehicle_service, echo_vehicle
from dealership.cli_module.commands.inventory_commands import list_command, search_command

STATUS_CHOICE = click.Choice([s.value for s in VehicleStatus], case_sensitive=False)


@click.group(name="employee")
def employee_group():
    """Gallery employee commands."""
    pass


@employee_group.command()
@click.option("--make", prompt=True, help="Vehicle manufacturer")
@click.option("--model", prompt=True, help="Vehicle model")
@click.option("--year", prompt=True, type=int, help="Model year")
@click.option("--mileage", prompt=True, type=int, help="Odometer reading")
@click.option("--price", prompt=True, type=float, help="Asking price")
@click.option("--chassis-number", prompt=True, help="Unique chassis number")
@click.option("--status", prompt="Status (in_stock/sold)", type=STATUS_CHOICE,
              default=VehicleStatus.IN_STOCK.value, help="Stock status")
@with_vehicle_service
def add(service, make, model, year, mileage, price, chassis_number, status):
    """Add a vehicle to the inventory."""
    vehicle = service.add_vehicle(
        Vehicle(make, model, year, mileage, price, chassis_number, status))
    click.echo("Vehicle added successfully.")
    echo_vehicle(vehicle)


@employee_group.command()
@click.argument("chassis_number")
@click.option("--make", help="New manufacturer")
@click.option("--model", help="New model")
@click.option("--year", type=int, help="New model year")
@click.option("--mileage", type=int, help="New mileage")
@click.option("--price", type=float, help="New price")
@click.option("--status", type=STATUS_CHOICE, help="New stock status")
@with_vehicle_service
def update(service, chassis_number, make, model, year, mileage, price, status):
    """Update a vehicle. Omitted options keep their current value."""
    existing = service.get_vehicle_by_chassis_number(chassis_number)

    if all(value is None for value in (make, model, year, mileage, price, status)):
        click.echo("No update information provided. Use the options to specify what to update.")
        click.echo("Example: dealership employee update CH001 --status sold")
        return

    updated = service.update_vehicle(Vehicle(
        make=existing.make if make is None else make,
        model=existing.model if model is None else model,
        year=existing.year if year is None else year,
        mileage=existing.mileage if mileage is None else mileage,
        price=existing.price if price is None else price,
        chassis_number=existing.chassis_number,
        status=existing.status if status is None else status,
    ))
    click.echo("Vehicle updated successfully.")
    echo_vehicle(updated)


@employee_group.command()
@click.argument("chassis_number")
@click.option("--confirm", is_flag=True, help="Confirm deletion without prompting")
@with_vehicle_service
def delete(service, chassis_number, confirm):
    """Delete a vehicle."""
    vehicle = service.get_vehicle_by_chassis_number(chassis_number)
    click.echo(f"Vehicle: {vehicle.make} {vehicle.model} ({vehicle.year})")

    if not confirm and not click.confirm("Are you sure you want to delete this vehicle?"):
        click.echo("Vehicle deletion cancelled.")
        return

    service.delete_vehicle(chassis_number)
    click.echo("Vehicle deleted successfully.")


@employee_group.command()
@click.argument("chassis_number")
@with_vehicle_service
def show(service, chassis_number):
    """Show a single vehicle."""
    echo_vehicle(service.get_vehicle_by_chassis_number(chassis_number))


employee_group.add_command(list_command)
employee_group.add_command(search_command)
