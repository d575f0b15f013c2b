"""Command modules for the dealership CLI."""

from dealership.cli_module.commands.employee_commands import employee_group
from dealership.cli_module.commands.customer_commands import customer_group
from dealership.cli_module.commands.menu_commands import menu_command

__all__ = [
    'employee_group',
    'customer_group',
    'menu_command',
]
