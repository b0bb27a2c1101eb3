# homestead/commands/__init__.py
"""
Commands package initializer.
Importing the command modules registers their handlers.
"""
from . import garden_commands, system_commands, time_commands
