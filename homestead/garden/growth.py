# homestead/garden/growth.py
"""
Growth rules for planted crops.

Stage and harvest readiness are pure functions of the species, the plant
and the current game time. The engine only mutates a plant when asked to
apply something: a stage write-back, a care action, or a harvest.
"""
import math
from typing import Optional

from homestead.config import (
    BASE_YIELD_RECURRING_HARVEST, BASE_YIELD_SINGLE_HARVEST, FERTILIZER_YIELD_BONUS,
    QUALITY_MAX, QUALITY_STEP, TIME_SEASONS_PER_YEAR, WATER_DAILY_DECAY,
    WATER_GAIN_PER_WATERING, WATER_LEVEL_MAX
)
from homestead.core.event_system import EventSystem
from homestead.core.game_time import CalendarDate
from homestead.garden.plant import HarvestResult, PlantInstance
from homestead.garden.species import PlantSpecies
from homestead.utils.logger import Logger


class GrowthEngine:
    def __init__(self, season_length_days: int, event_system: Optional[EventSystem] = None):
        self.season_length_days = season_length_days
        self.event_system = event_system

    # --- Pure queries ---

    def days_elapsed(self, since: CalendarDate, current: CalendarDate) -> int:
        """Calendar days from ``since`` to ``current``; negative if ``current`` is earlier."""
        return ((current.year - since.year) * TIME_SEASONS_PER_YEAR * self.season_length_days
                + (current.season - since.season) * self.season_length_days
                + (current.day - since.day))

    def compute_stage(self, species: PlantSpecies, days_elapsed: int) -> int:
        if days_elapsed <= 0:
            return 0
        return min(days_elapsed // species.days_per_stage, species.final_stage)

    def is_ready_to_harvest(self, species: PlantSpecies, instance: PlantInstance, current: CalendarDate) -> bool:
        if instance.growth_stage != species.final_stage:
            return False
        if not species.is_recurring_harvest:
            return True
        if instance.last_harvested_at is None:
            return True
        return self.days_elapsed(instance.last_harvested_at, current) >= species.harvest_interval_days

    def calculate_yield(self, species: PlantSpecies, instance: PlantInstance) -> int:
        base_yield = BASE_YIELD_RECURRING_HARVEST if species.is_recurring_harvest else BASE_YIELD_SINGLE_HARVEST
        care_bonus = instance.water_level / 100 + (FERTILIZER_YIELD_BONUS if instance.is_fertilized else 0)
        return math.floor(base_yield * (1 + care_bonus))

    # --- Mutations ---

    def update_stage(self, species: PlantSpecies, instance: PlantInstance, current: CalendarDate) -> bool:
        """Writes back the stage if the plant has grown. Stages never regress."""
        new_stage = self.compute_stage(species, self.days_elapsed(instance.planted_at, current))
        if new_stage <= instance.growth_stage:
            return False

        old_stage = instance.growth_stage
        instance.growth_stage = new_stage
        Logger.info("GrowthEngine", f"{species.display_name} ({instance.instance_id}) grew to stage {new_stage + 1}/{species.growth_stage_count}.")
        if self.event_system:
            self.event_system.publish("growth_stage_changed", {
                "instance_id": instance.instance_id,
                "species_id": species.species_id,
                "region_id": instance.region_id,
                "old_stage": old_stage,
                "new_stage": new_stage
            })
        return True

    def apply_daily_decay(self, instance: PlantInstance) -> None:
        """Rolls one day of the watering window. Call at most once per game day."""
        if not instance.watered_today:
            instance.water_level = max(0, instance.water_level - WATER_DAILY_DECAY)
        instance.watered_today = False

    def water(self, instance: PlantInstance) -> bool:
        if instance.watered_today:
            return False
        instance.water_level = min(WATER_LEVEL_MAX, instance.water_level + WATER_GAIN_PER_WATERING)
        instance.watered_today = True
        instance.quality = min(QUALITY_MAX, instance.quality + QUALITY_STEP)
        Logger.debug("GrowthEngine", f"Watered {instance.instance_id}: water={instance.water_level}, quality={instance.quality}.")
        return True

    def fertilize(self, species: PlantSpecies, instance: PlantInstance) -> bool:
        if instance.is_fertilized:
            return False
        instance.is_fertilized = True
        instance.quality = min(QUALITY_MAX, instance.quality + QUALITY_STEP)
        instance.projected_yield = self.calculate_yield(species, instance)
        Logger.debug("GrowthEngine", f"Fertilized {instance.instance_id}: quality={instance.quality}, yield={instance.projected_yield}.")
        return True

    def harvest(self, instance: PlantInstance, species: PlantSpecies, current: CalendarDate) -> Optional[HarvestResult]:
        """
        Harvests a ready plant. Single-harvest plants must then be removed
        by the caller (``remove_plant`` is set on the result).
        """
        if not self.is_ready_to_harvest(species, instance, current):
            Logger.debug("GrowthEngine", f"{instance.instance_id} is not ready to harvest (stage {instance.growth_stage}).")
            return None

        yield_amount = self.calculate_yield(species, instance)
        instance.last_harvested_at = CalendarDate(day=current.day, season=current.season, year=current.year)
        instance.harvest_count += 1
        if species.is_recurring_harvest:
            instance.is_fertilized = False
        instance.projected_yield = self.calculate_yield(species, instance)
        instance.is_harvest_ready = False

        result = HarvestResult(
            instance_id=instance.instance_id,
            species_id=species.species_id,
            yield_amount=yield_amount,
            quality=instance.quality,
            days_grown=self.days_elapsed(instance.planted_at, current),
            harvest_count=instance.harvest_count,
            remove_plant=not species.is_recurring_harvest
        )
        Logger.info("GrowthEngine", f"Harvested {yield_amount} {species.display_name} from {instance.instance_id} (harvest #{instance.harvest_count}).")
        return result
