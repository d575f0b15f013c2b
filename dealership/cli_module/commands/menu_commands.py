"""Interactive role-based menu for the dealership CLI."""

import click

from dealership.models.vehicle import Vehicle
from dealership.repositories.txt_vehicle_repository import TxtVehicleRepository, StorageError
from dealership.services.vehicle_service import VehicleService, VehicleServiceError
from dealership.cli_module.utils import echo_vehicles, YEAR_RANGE, MILEAGE_RANGE, PRICE_RANGE

EMPLOYEE_ROLE = 1
CUSTOMER_ROLE = 2


def _prompt_or_keep(label, current, value_type):
    """Prompt for a new value; a blank answer keeps ``current``."""
    answer = click.prompt(f"New {label} ({current})", default="", show_default=False)
    if not answer.strip():
        return current
    try:
        return value_type(answer)
    except ValueError:
        raise click.BadParameter(f"'{answer}' is not a valid {label.lower()}")


def add_vehicle(service):
    click.echo("\n--- Add Vehicle ---")
    vehicle = Vehicle(
        make=click.prompt("Make"),
        model=click.prompt("Model"),
        year=click.prompt("Year", type=int),
        mileage=click.prompt("Mileage", type=int),
        price=click.prompt("Price", type=float),
        chassis_number=click.prompt("Chassis Number"),
        status=click.prompt("Status (in_stock/sold)"),
    )
    service.add_vehicle(vehicle)
    click.echo("Vehicle added successfully.")


def update_vehicle(service):
    click.echo("\n--- Update Vehicle ---")
    chassis_number = click.prompt("Enter chassis number of vehicle to update")
    existing = service.get_vehicle_by_chassis_number(chassis_number)

    click.echo("Leave field blank to keep current value.")
    updated = Vehicle(
        make=_prompt_or_keep("Make", existing.make, str),
        model=_prompt_or_keep("Model", existing.model, str),
        year=_prompt_or_keep("Year", existing.year, int),
        mileage=_prompt_or_keep("Mileage", existing.mileage, int),
        price=_prompt_or_keep("Price", existing.price, float),
        chassis_number=existing.chassis_number,
        status=_prompt_or_keep("Status", existing.status, str),
    )
    service.update_vehicle(updated)
    click.echo("Vehicle updated successfully.")


def delete_vehicle(service):
    click.echo("\n--- Delete Vehicle ---")
    chassis_number = click.prompt("Enter chassis number of vehicle to delete")
    service.delete_vehicle(chassis_number)
    click.echo("Vehicle deleted successfully.")


def view_all_vehicles(service):
    click.echo("\n--- All Vehicles ---")
    echo_vehicles(service.get_all_vehicles(), "No vehicles available.")


def search_vehicles(service):
    click.echo("\n--- Search Vehicles ---")
    make = click.prompt("Make (or leave blank)", default="", show_default=False)
    model = click.prompt("Model (or leave blank)", default="", show_default=False)
    min_year = click.prompt("Min Year", type=int, default=YEAR_RANGE[0])
    max_year = click.prompt("Max Year", type=int, default=YEAR_RANGE[1])
    min_mileage = click.prompt("Min Mileage", type=int, default=MILEAGE_RANGE[0])
    max_mileage = click.prompt("Max Mileage", type=int, default=MILEAGE_RANGE[1])
    min_price = click.prompt("Min Price", type=float, default=PRICE_RANGE[0])
    max_price = click.prompt("Max Price", type=float, default=PRICE_RANGE[1])
    status = click.prompt("Status (in_stock/sold or leave blank)", default="", show_default=False)

    results = service.search_vehicles(
        make, model, min_year, max_year, min_mileage, max_mileage,
        min_price, max_price, status)
    echo_vehicles(results, "No matching vehicles found.")


EMPLOYEE_MENU = (
    "Gallery Employee Menu",
    [
        ("Add Vehicle", add_vehicle),
        ("Update Vehicle", update_vehicle),
        ("Delete Vehicle", delete_vehicle),
        ("View All Vehicles", view_all_vehicles),
        ("Search Vehicles", search_vehicles),
    ],
    "Exiting application. Goodbye!",
)

CUSTOMER_MENU = (
    "Customer Menu",
    [
        ("View All Vehicles", view_all_vehicles),
        ("Search Vehicles", search_vehicles),
    ],
    "Thank you for visiting. Goodbye!",
)


def run_menu(service, menu):
    """Loop over a numbered menu until the user picks 0."""
    title, actions, farewell = menu
    while True:
        click.echo(f"\n--- {title} ---")
        for number, (label, _) in enumerate(actions, 1):
            click.echo(f"{number}. {label}")
        click.echo("0. Exit")
        choice = click.prompt("Select an option", type=int)

        if choice == 0:
            click.echo(farewell)
            return
        if not 1 <= choice <= len(actions):
            click.echo("Invalid selection. Please try again.")
            continue

        _, action = actions[choice - 1]
        try:
            action(service)
        except (VehicleServiceError, StorageError, click.BadParameter) as e:
            message = e.format_message() if isinstance(e, click.BadParameter) else str(e)
            click.echo(f"Error: {message}", err=True)


@click.command(name="menu")
@click.pass_context
def menu_command(ctx):
    """Start the interactive dealership menu."""
    click.echo("Welcome to the Second Hand Car Dealership System!")
    role = click.prompt("Please enter your role (1 - Gallery Employee, 2 - Customer)", type=int)

    if role == EMPLOYEE_ROLE:
        menu = EMPLOYEE_MENU
    elif role == CUSTOMER_ROLE:
        menu = CUSTOMER_MENU
    else:
        click.echo("Invalid role selection. Exiting.")
        return

    try:
        with TxtVehicleRepository(ctx.find_root().obj["inventory_file"]) as repository:
            run_menu(VehicleService(repository), menu)
    except StorageError as e:
        click.echo(f"Error: {str(e)}", err=True)
