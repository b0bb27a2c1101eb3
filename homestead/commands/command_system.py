# homestead/commands/command_system.py
from typing import Any, Dict, List, Optional
from functools import wraps

from homestead.config import (
    FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE,
    HELP_MAX_COMMANDS_PER_CATEGORY
)

# Dictionary to store all registered commands
registered_commands: Dict[str, Dict[str, Any]] = {}
command_groups: Dict[str, List[Dict[str, Any]]] = {
    "time": [], "garden": [], "system": [], "other": []
}

def command(name: str, aliases: Optional[List[str]] = None, category: str = "other",
           help_text: str = "No help available."):
    """
    Decorator for registering game commands.
    """
    aliases = aliases or []

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        cmd_data = {
            "name": name,
            "aliases": aliases,
            "handler": wrapper,
            "help_text": help_text,
            "category": category
        }
        wrapper._command_info = cmd_data # type: ignore

        registered_commands[name] = cmd_data
        for alias in aliases:
            registered_commands[alias] = cmd_data

        command_groups.setdefault(category, []).append(cmd_data)
        return wrapper
    return decorator

def get_registered_commands() -> Dict[str, Dict[str, Any]]:
    """Get all registered commands."""
    return registered_commands

def get_command_groups() -> Dict[str, List[Dict[str, Any]]]:
    """Get commands organized by category."""
    return command_groups

def unregister_command(name: str) -> bool:
    """Unregister a command and all its aliases."""
    if name not in registered_commands:
        return False

    cmd_data = registered_commands[name]
    cmd_name = cmd_data["name"]

    registered_commands.pop(cmd_name, None)
    for alias in cmd_data["aliases"]:
        registered_commands.pop(alias, None)

    category = cmd_data["category"]
    if category in command_groups:
        command_groups[category] = [c for c in command_groups[category] if c["name"] != cmd_name]
    return True

class CommandProcessor:
    """Processes user input and dispatches commands to appropriate handlers."""

    def process_input(self, text: str, context: Any = None) -> str:
        """
        Process user input and execute the corresponding command using a
        longest-match-first strategy for multi-word commands.
        """
        text = text.strip().lower()
        if not text: return ""
        parts = text.split()

        for i in range(len(parts), 0, -1):
            potential_cmd = " ".join(parts[:i])
            if potential_cmd in registered_commands:
                cmd_data = registered_commands[potential_cmd]
                args = parts[i:]

                if context and isinstance(context, dict):
                    context['executed_command_name'] = cmd_data.get('name', potential_cmd)

                return cmd_data["handler"](args, context)

        return f"{FORMAT_ERROR}Unknown command: {parts[0]}{FORMAT_RESET}"

    def get_help_text(self) -> str:
        """Generate the top-level help text showing categories and commands."""
        help_text = f"{FORMAT_TITLE}===== Homestead Help ====={FORMAT_RESET}\n\n"
        help_text += f"Type '{FORMAT_HIGHLIGHT}help <category>{FORMAT_RESET}' or '{FORMAT_HIGHLIGHT}help <command>{FORMAT_RESET}' for details.\n\n"
        help_text += f"{FORMAT_TITLE}Command Categories:{FORMAT_RESET}\n"

        for category in sorted(cat for cat, cmds in command_groups.items() if cmds):
            names = sorted({cmd['name'] for cmd in command_groups[category]})
            if len(names) > HELP_MAX_COMMANDS_PER_CATEGORY:
                command_list_str = ", ".join(names[:HELP_MAX_COMMANDS_PER_CATEGORY]) + ", ..."
            else:
                command_list_str = ", ".join(names)
            help_text += f"  - {FORMAT_CATEGORY}{category.capitalize()}{FORMAT_RESET} ({FORMAT_HIGHLIGHT}{command_list_str}{FORMAT_RESET})\n"

        help_text += f"\n{FORMAT_TITLE}Getting Started:{FORMAT_RESET}\n"
        help_text += f"  - {FORMAT_HIGHLIGHT}plant carrot{FORMAT_RESET}\n"
        help_text += f"  - {FORMAT_HIGHLIGHT}water{FORMAT_RESET}\n"
        help_text += f"  - {FORMAT_HIGHLIGHT}sleep{FORMAT_RESET}\n"
        help_text += f"  - {FORMAT_HIGHLIGHT}status{FORMAT_RESET}\n"
        return help_text

    def get_command_help(self, command_or_category_name: str) -> str:
        """Get detailed help for a specific command OR a category."""
        name_lower = command_or_category_name.lower()

        if name_lower in command_groups and command_groups[name_lower]:
            return self._get_category_help(name_lower)

        if name_lower in registered_commands:
            cmd = registered_commands[name_lower]
            help_text = f"{FORMAT_TITLE}Command: {cmd['name'].upper()}{FORMAT_RESET}\n\n"
            help_text += f"{FORMAT_CATEGORY}Category:{FORMAT_RESET} {cmd['category'].capitalize()}\n"
            if cmd['aliases']:
                help_text += f"{FORMAT_CATEGORY}Aliases:{FORMAT_RESET} {', '.join(cmd['aliases'])}\n"
            help_text += f"\n{FORMAT_CATEGORY}Description:{FORMAT_RESET}\n"
            for line in cmd['help_text'].split('\n'):
                help_text += f"  {line}\n"
            return help_text

        return f"{FORMAT_ERROR}No help found for '{command_or_category_name}'. It is not a valid command or category.{FORMAT_RESET}"

    def get_command_suggestions(self, partial_command: str) -> List[str]:
        """Get a list of commands that start with the given partial command."""
        partial = partial_command.lower()
        suggestions = set()
        for cmd_data in registered_commands.values():
            if cmd_data['name'].startswith(partial): suggestions.add(cmd_data['name'])
            for alias in cmd_data.get('aliases', []):
                if alias.startswith(partial): suggestions.add(alias)
        return sorted(suggestions)

    def _get_category_help(self, category_name: str) -> str:
        """Generate help text for a specific command category."""
        help_text = f"{FORMAT_TITLE}Help: {category_name.capitalize()} Commands{FORMAT_RESET}\n\n"

        unique_commands = {}
        for cmd in command_groups[category_name]:
            unique_commands.setdefault(cmd["name"], cmd)

        for name in sorted(unique_commands):
            cmd = unique_commands[name]
            aliases = f" ({', '.join(cmd['aliases'])})" if cmd['aliases'] else ""
            first_line_help = cmd['help_text'].split('\n')[0]
            help_text += f"  {FORMAT_HIGHLIGHT}{cmd['name']}{aliases}{FORMAT_RESET}\n"
            help_text += f"    - {first_line_help}\n"
        return help_text
