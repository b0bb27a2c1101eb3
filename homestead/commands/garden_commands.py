# homestead/commands/garden_commands.py
"""
Contains the planting and plant-care commands.
Care verbs take an optional plant id; without one they act on the
selected plant, which is the one most recently planted.
"""
from homestead.commands.command_system import command
from homestead.config import (
    FORMAT_ERROR, FORMAT_GRAY, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_SUCCESS, FORMAT_TITLE,
    TIME_SEASON_NAMES
)

NO_PLANT_HERE = f"{FORMAT_ERROR}No plant found at this location.{FORMAT_RESET}"
TIME_NOT_READY = f"{FORMAT_ERROR}Time system not ready.{FORMAT_RESET}"


def _find_plant(args, game):
    """Returns (instance, species) for the targeted plant in the active region, or (None, None)."""
    plant_id = args[0] if args else game.selected_plant_id
    instance = game.plant_registry.get(plant_id)
    if not instance or instance.region_id != game.active_region_id:
        return None, None
    return instance, game.plant_registry.get_species(instance)


@command("spawn", ["plant", "sow"], "garden", "Plant a new crop here.\nUsage: plant <species>")
def spawn_handler(args, context):
    game = context["game"]
    if not args:
        known = ", ".join(game.catalog.ids())
        return f"{FORMAT_ERROR}Plant what?{FORMAT_RESET} Known species: {known}"

    species_id = args[0]
    instance_id = game.plant_registry.spawn(species_id, game.active_region_id)
    if not instance_id:
        return f"{FORMAT_ERROR}Unknown plant type '{species_id}'.{FORMAT_RESET}"

    game.selected_plant_id = instance_id
    species = game.catalog.get(species_id)
    response = f"{FORMAT_SUCCESS}You plant some {species.display_name} ({instance_id}).{FORMAT_RESET}"
    if not species.grows_in(game.clock.get_current_time().season):
        response += f"\n{FORMAT_GRAY}{species.display_name} is out of season and may not thrive.{FORMAT_RESET}"
    return response


@command("water", [], "garden", "Water a plant once per day.\nUsage: water [plant id]")
def water_handler(args, context):
    game = context["game"]
    instance, species = _find_plant(args, game)
    if not instance: return NO_PLANT_HERE

    if not game.growth_engine.water(instance):
        return f"{species.display_name if species else instance.species_id} has already been watered today."
    return f"{FORMAT_SUCCESS}You water the plant. Water level: {instance.water_level}/100.{FORMAT_RESET}"


@command("fertilize", ["fertilise", "feed"], "garden", "Fertilize a plant to raise its yield.\nUsage: fertilize [plant id]")
def fertilize_handler(args, context):
    game = context["game"]
    instance, species = _find_plant(args, game)
    if not instance or not species: return NO_PLANT_HERE

    if not game.growth_engine.fertilize(species, instance):
        return f"{species.display_name} has already been fertilized."
    return f"{FORMAT_SUCCESS}You fertilize the {species.display_name}. Expected yield: {instance.projected_yield}.{FORMAT_RESET}"


@command("harvest", ["reap"], "garden", "Harvest a plant that is ready.\nUsage: harvest [plant id]")
def harvest_handler(args, context):
    game = context["game"]
    if not game.clock: return TIME_NOT_READY
    instance, species = _find_plant(args, game)
    if not instance or not species: return NO_PLANT_HERE

    result = game.plant_registry.harvest_plant(instance.instance_id, game.clock.get_current_time())
    if not result:
        return f"{species.display_name} is not ready to harvest yet."

    response = f"{FORMAT_SUCCESS}You harvest {result.yield_amount} {species.display_name} (quality {result.quality:.1f}).{FORMAT_RESET}"
    if result.remove_plant:
        if game.selected_plant_id == result.instance_id:
            game.selected_plant_id = None
    else:
        response += f"\nIt will produce again in {species.harvest_interval_days} days."
    return response


@command("status", ["inspect", "st"], "garden", "Show the state of a plant.\nUsage: status [plant id]")
def status_handler(args, context):
    game = context["game"]
    instance, species = _find_plant(args, game)
    if not instance: return NO_PLANT_HERE
    if not species:
        return f"{FORMAT_ERROR}Plant {instance.instance_id} has unknown species '{instance.species_id}'.{FORMAT_RESET}"

    engine = game.growth_engine
    now = game.clock.get_current_time()
    ready = engine.is_ready_to_harvest(species, instance, now.date())
    planted = instance.planted_at

    lines = [f"{FORMAT_TITLE}{species.display_name} ({instance.instance_id}){FORMAT_RESET}"]
    lines.append(f"Planted: day {planted.day}, {TIME_SEASON_NAMES[planted.season]}, Year {planted.year}")
    lines.append(f"Stage: {instance.growth_stage + 1}/{species.growth_stage_count}")
    lines.append(f"Water: {instance.water_level}/100" + (" (watered today)" if instance.watered_today else ""))
    lines.append(f"Quality: {instance.quality:.1f}")
    lines.append(f"Fertilized: {'yes' if instance.is_fertilized else 'no'}")
    lines.append(f"Seasons: {', '.join(species.season_names())}"
                 + ("" if species.grows_in(now.season) else f" {FORMAT_ERROR}(out of season){FORMAT_RESET}"))
    if species.is_recurring_harvest:
        lines.append(f"Harvests: {instance.harvest_count} (every {species.harvest_interval_days} days)")
    lines.append(f"Expected yield: {engine.calculate_yield(species, instance)}")
    lines.append(f"{FORMAT_HIGHLIGHT}Ready to harvest!{FORMAT_RESET}" if ready else "Not ready to harvest.")
    return "\n".join(lines)


@command("plants", ["crops"], "garden", "List the plants growing here.")
def plants_handler(args, context):
    game = context["game"]
    plants = game.plant_registry.plants_in_region(game.active_region_id)
    if not plants:
        return "Nothing is growing here."

    lines = [f"{FORMAT_TITLE}Plants in {game.active_region_id}:{FORMAT_RESET}"]
    for instance in plants:
        species = game.plant_registry.get_species(instance)
        name = species.display_name if species else instance.species_id
        stages = species.growth_stage_count if species else "?"
        marker = " *" if instance.instance_id == game.selected_plant_id else ""
        ready = f" {FORMAT_HIGHLIGHT}[ready]{FORMAT_RESET}" if instance.is_harvest_ready else ""
        lines.append(f"  {instance.instance_id}{marker}: {name}, stage {instance.growth_stage + 1}/{stages}{ready}")
    return "\n".join(lines)
