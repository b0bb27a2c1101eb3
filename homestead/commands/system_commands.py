# homestead/commands/system_commands.py
"""
Contains help, save/load and other meta-game commands.
"""
from homestead.commands.command_system import command
from homestead.config import FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_SUCCESS


@command("help", ["h", "?"], "system", "Show help.\nUsage: help [command|category]")
def help_handler(args, context):
    cp = context["command_processor"]
    return cp.get_command_help(args[0]) if args else cp.get_help_text()


@command("save", [], "system", "Save game state.\nUsage: save [filename]")
def save_handler(args, context):
    game = context["game"]
    fname = args[0] if args else game.current_save_file
    if game.save_game(fname):
        return f"{FORMAT_SUCCESS}Game saved to {game.current_save_file}.{FORMAT_RESET}"
    return f"{FORMAT_ERROR}Error saving game to {fname}.{FORMAT_RESET}"


@command("load", [], "system", "Load game state.\nUsage: load [filename]")
def load_handler(args, context):
    game = context["game"]
    fname = args[0] if args else game.current_save_file
    if not game.save_manager.exists(fname):
        return f"{FORMAT_ERROR}Save file '{fname}' not found.{FORMAT_RESET}"
    if game.load_game(fname):
        return f"{FORMAT_SUCCESS}Game loaded from {game.current_save_file}.{FORMAT_RESET}\n{game.clock.format_time()}"
    return f"{FORMAT_ERROR}Error loading game from {fname}.{FORMAT_RESET}"


@command("region", ["goto"], "system", "Show or change the active region.\nUsage: region [region id]")
def region_handler(args, context):
    game = context["game"]
    if not args:
        return f"You are in {FORMAT_HIGHLIGHT}{game.active_region_id}{FORMAT_RESET}."
    game.change_region(args[0])
    count = len(game.plant_registry.plants_in_region(game.active_region_id))
    return f"You travel to {FORMAT_HIGHLIGHT}{game.active_region_id}{FORMAT_RESET}. Plants here: {count}."
