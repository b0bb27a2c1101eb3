# homestead/garden/registry.py
"""
Owns every live plant in the session, keyed by instance id and tagged with
the region it was planted in. Periodic updates only touch plants in the
region the host reports as active.
"""
import uuid
from typing import Any, Dict, List, Optional

from homestead.config import WATER_DAILY_DECAY, WATER_LEVEL_MAX
from homestead.core.clock import Clock
from homestead.core.event_system import EventSystem
from homestead.core.game_time import CalendarDate, GameTime
from homestead.garden.growth import GrowthEngine
from homestead.garden.plant import HarvestResult, PlantInstance
from homestead.garden.species import PlantSpecies, SpeciesCatalog
from homestead.utils.logger import Logger

# More missed days than this cannot lower the water level any further
MAX_DECAY_DAYS_PER_UPDATE = WATER_LEVEL_MAX // WATER_DAILY_DECAY + 1


class PlantRegistry:
    def __init__(self, catalog: SpeciesCatalog, clock: Clock, growth_engine: GrowthEngine,
                 event_system: Optional[EventSystem] = None):
        self.catalog = catalog
        self.clock = clock
        self.growth_engine = growth_engine
        self.event_system = event_system
        self.plants: Dict[str, PlantInstance] = {}

    def __len__(self) -> int:
        return len(self.plants)

    def __contains__(self, instance_id: str) -> bool:
        return instance_id in self.plants

    # --- Lifecycle ---

    def spawn(self, species_id: str, region_id: str, instance_id: Optional[str] = None) -> Optional[str]:
        """Plants a new instance and returns its id, or None for an unknown species."""
        species = self.catalog.get(species_id)
        if not species:
            Logger.warning("PlantRegistry", f"Cannot spawn unknown plant species '{species_id}'.")
            return None

        instance_id = instance_id or f"plant_{uuid.uuid4().hex[:8]}"
        if instance_id in self.plants:
            Logger.warning("PlantRegistry", f"Plant id '{instance_id}' is already in use.")
            return None

        planted_at = self.clock.get_current_time().date()
        instance = PlantInstance(instance_id, species_id, region_id, planted_at)
        instance.projected_yield = self.growth_engine.calculate_yield(species, instance)
        self.plants[instance_id] = instance

        Logger.info("PlantRegistry", f"Planted {species.display_name} as {instance_id} in '{region_id}' on {planted_at}.")
        self._publish("plant_spawned", {
            "instance_id": instance_id, "species_id": species_id, "region_id": region_id
        })
        return instance_id

    def get(self, instance_id: Optional[str]) -> Optional[PlantInstance]:
        if not instance_id:
            return None
        return self.plants.get(instance_id)

    def get_species(self, instance: PlantInstance) -> Optional[PlantSpecies]:
        return self.catalog.get(instance.species_id)

    def remove(self, instance_id: str) -> bool:
        instance = self.plants.pop(instance_id, None)
        if not instance:
            return False
        Logger.info("PlantRegistry", f"Removed plant {instance_id}.")
        self._publish("plant_removed", {"instance_id": instance_id, "region_id": instance.region_id})
        return True

    def clear(self) -> None:
        self.plants.clear()

    def plants_in_region(self, region_id: str) -> List[PlantInstance]:
        return [p for p in self.plants.values() if p.region_id == region_id]

    # --- Periodic update ---

    def update_active_region(self, region_id: str, current_time: GameTime) -> List[PlantInstance]:
        """
        Runs the stage check, the daily water decay and the readiness check,
        in that order, for every plant in ``region_id``. All plants see the
        same ``current_time`` snapshot.
        """
        current = current_time.date()
        updated = []
        for instance in self.plants_in_region(region_id):
            species = self.catalog.get(instance.species_id)
            if not species:
                Logger.warning("PlantRegistry", f"Plant {instance.instance_id} has unknown species '{instance.species_id}'; skipping.")
                continue

            self.growth_engine.update_stage(species, instance, current)
            self._roll_care_days(instance, current)

            ready = self.growth_engine.is_ready_to_harvest(species, instance, current)
            if ready != instance.is_harvest_ready:
                instance.is_harvest_ready = ready
                self._publish("harvest_ready_changed", {
                    "instance_id": instance.instance_id, "species_id": species.species_id,
                    "region_id": region_id, "ready": ready
                })
            updated.append(instance)
        return updated

    def _roll_care_days(self, instance: PlantInstance, current: CalendarDate) -> None:
        days = self.growth_engine.days_elapsed(instance.last_care_date, current)
        if days <= 0:
            return
        for _ in range(min(days, MAX_DECAY_DAYS_PER_UPDATE)):
            self.growth_engine.apply_daily_decay(instance)
        instance.last_care_date = current

    # --- Care actions ---

    def harvest_plant(self, instance_id: str, current_time: GameTime) -> Optional[HarvestResult]:
        """Harvests through the growth engine and removes single-harvest plants."""
        instance = self.get(instance_id)
        species = self.get_species(instance) if instance else None
        if not instance or not species:
            return None

        result = self.growth_engine.harvest(instance, species, current_time.date())
        if result and result.remove_plant:
            self.remove(instance_id)
        return result

    # --- Persistence ---

    def to_save_data(self) -> Dict[str, Any]:
        return {"plants": [instance.to_dict() for instance in self.plants.values()]}

    def load_save_data(self, data: Optional[Dict[str, Any]]) -> None:
        self.plants.clear()
        if not data or not isinstance(data, dict):
            Logger.info("PlantRegistry", "No saved garden found, starting empty.")
            return

        records = data.get("plants", [])
        if not isinstance(records, list):
            Logger.error("PlantRegistry", f"Saved garden plants must be a list, got {type(records).__name__}.")
            records = []

        for record in records:
            try:
                instance = PlantInstance.from_dict(record) if isinstance(record, dict) else None
            except (TypeError, ValueError) as e:
                Logger.error("PlantRegistry", f"Invalid plant record {record}: {e}")
                continue
            if not instance:
                Logger.error("PlantRegistry", f"Invalid plant record skipped during restore: {record}")
                continue
            species = self.catalog.get(instance.species_id)
            if not species:
                Logger.warning("PlantRegistry", f"Restored plant {instance.instance_id} has unknown species '{instance.species_id}'.")
            elif instance.growth_stage > species.final_stage:
                Logger.warning("PlantRegistry", f"Restored plant {instance.instance_id} is past the last stage of {species.display_name}; clamping.")
                instance.growth_stage = species.final_stage
            self.plants[instance.instance_id] = instance

        Logger.info("PlantRegistry", f"Loaded {len(self.plants)} plants.")

    def _publish(self, event_type: str, data: Dict[str, Any]) -> None:
        if self.event_system:
            self.event_system.publish(event_type, data)
