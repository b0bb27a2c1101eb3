# homestead/commands/time_commands.py
"""
Commands that read or drive the game clock.
"""
from homestead.commands.command_system import command
from homestead.config import FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_SUCCESS, FORMAT_TITLE

TIME_NOT_READY = f"{FORMAT_ERROR}Time system not ready.{FORMAT_RESET}"


def _get_clock(context):
    game = context.get("game") if context else None
    return getattr(game, "clock", None)


@command("time", ["clock", "date"], "time", "Display the current in-game time and date.")
def time_handler(args, context):
    clock = _get_clock(context)
    if not clock: return TIME_NOT_READY

    now = clock.get_current_time()
    response = f"{FORMAT_TITLE}{clock.format_time()}{FORMAT_RESET}\n"
    response += f"Season: {FORMAT_HIGHLIGHT}{now.season_name}{FORMAT_RESET}, day {now.day} of {clock.config.season_length_days}\n"
    if clock.is_at_day_limit():
        response += "It's late. Time will not pass until you sleep.\n"
    elif clock.is_paused:
        reason = ", ".join(clock.pause_controller.active_contexts()) or "paused"
        response += f"Time is stopped ({reason}).\n"
    return response


@command("sleep", ["rest"], "time", "Sleep until the start of the next day.")
def sleep_handler(args, context):
    clock = _get_clock(context)
    if not clock: return TIME_NOT_READY

    minutes = clock.sleep_until_next_day_start()
    game = context["game"]
    game.refresh_active_region()
    now = clock.get_current_time()
    hours, mins = divmod(minutes, 60)
    return (f"{FORMAT_SUCCESS}You sleep for {hours}h {mins:02d}m and wake on "
            f"{now.season_name} {now.day}, Year {now.year} at {now.hour:02d}:{now.minute:02d}.{FORMAT_RESET}")


@command("pause", [], "time", "Stop the flow of game time.")
def pause_handler(args, context):
    clock = _get_clock(context)
    if not clock: return TIME_NOT_READY
    if clock.pause_controller.explicit_pause:
        return "Time is already paused."
    clock.pause()
    return f"{FORMAT_SUCCESS}Time paused.{FORMAT_RESET}"


@command("resume", ["unpause"], "time", "Let game time flow again after a pause.")
def resume_handler(args, context):
    clock = _get_clock(context)
    if not clock: return TIME_NOT_READY
    if not clock.pause_controller.explicit_pause:
        return "Time is not paused."
    clock.resume()
    if clock.paused_by_context:
        return f"Time will resume once you leave the {', '.join(clock.pause_controller.active_contexts())}."
    return f"{FORMAT_SUCCESS}Time resumed.{FORMAT_RESET}"
