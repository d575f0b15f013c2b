"""Customer commands for the dealership CLI."""

import click

from dealership.cli_module.commands.inventory_commands import list_command, search_command


@click.group(name="customer")
def customer_group():
    """Customer commands: browse and search the inventory."""
    pass


customer_group.add_command(list_command)
customer_group.add_command(search_command)
