"""Main CLI entry point for the dealership application."""

import logging

import click

from dealership import config
from dealership.cli_module.commands.employee_commands import employee_group
from dealership.cli_module.commands.customer_commands import customer_group
from dealership.cli_module.commands.menu_commands import menu_command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--inventory-file", envvar="DEALERSHIP_INVENTORY_FILE",
              default=config.INVENTORY_FILE, help="Inventory text file")
@click.pass_context
def cli(ctx, inventory_file):
    """Inventory management for a used-vehicle dealership."""
    ctx.ensure_object(dict)
    ctx.obj["inventory_file"] = inventory_file


cli.add_command(employee_group)
cli.add_command(customer_group)
cli.add_command(menu_command)


def main():
    """Entry point for the application."""
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.WARNING))
    cli()


if __name__ == '__main__':
    main()
