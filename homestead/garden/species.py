# homestead/garden/species.py
"""
Plant species reference data and the loader for the species database.
"""
import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

from homestead.config import (
    DEFAULT_PLANT_SPECIES, SPECIES_DEFAULT_DAYS_PER_STAGE, SPECIES_DEFAULT_HARVEST_INTERVAL,
    SPECIES_DEFAULT_STAGES, SPECIES_FILE, SPECIES_MAX_STAGES, SPECIES_MIN_STAGES,
    TIME_SEASON_NAMES, TIME_SEASONS_PER_YEAR
)
from homestead.utils.logger import Logger

ALL_SEASONS = frozenset(range(TIME_SEASONS_PER_YEAR))


@dataclass(frozen=True)
class PlantSpecies:
    species_id: str
    display_name: str
    growth_stage_count: int = SPECIES_DEFAULT_STAGES
    days_per_stage: int = SPECIES_DEFAULT_DAYS_PER_STAGE
    valid_seasons: FrozenSet[int] = field(default=ALL_SEASONS)
    is_recurring_harvest: bool = False
    harvest_interval_days: int = SPECIES_DEFAULT_HARVEST_INTERVAL

    @property
    def final_stage(self) -> int:
        return self.growth_stage_count - 1

    def grows_in(self, season: int) -> bool:
        return season in self.valid_seasons

    def season_names(self) -> List[str]:
        return [TIME_SEASON_NAMES[s] for s in sorted(self.valid_seasons)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.species_id,
            "name": self.display_name,
            "stages": self.growth_stage_count,
            "daysPerStage": self.days_per_stage,
            "seasons": sorted(self.valid_seasons),
            "multiHarvest": self.is_recurring_harvest,
            "harvestInterval": self.harvest_interval_days
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['PlantSpecies']:
        """
        Builds a species from a database record.
        Out-of-range numbers are clamped; a record without an id is rejected.
        """
        species_id = str(data.get("id") or "").strip()
        if not species_id:
            Logger.error("PlantSpecies", f"Skipping species record without an id: {data}")
            return None

        stages = _int_or(data.get("stages"), SPECIES_DEFAULT_STAGES)
        stages = max(SPECIES_MIN_STAGES, min(SPECIES_MAX_STAGES, stages))

        days_per_stage = max(1, _int_or(data.get("daysPerStage"), SPECIES_DEFAULT_DAYS_PER_STAGE))
        harvest_interval = max(1, _int_or(data.get("harvestInterval"), SPECIES_DEFAULT_HARVEST_INTERVAL))

        seasons = set()
        for raw in data.get("seasons") or []:
            season = _int_or(raw, -1)
            if season in ALL_SEASONS:
                seasons.add(season)
            else:
                Logger.warning("PlantSpecies", f"Species '{species_id}': ignoring unknown season {raw!r}.")

        return cls(
            species_id=species_id,
            display_name=str(data.get("name") or species_id.replace("_", " ").title()),
            growth_stage_count=stages,
            days_per_stage=days_per_stage,
            valid_seasons=frozenset(seasons) if seasons else ALL_SEASONS,
            is_recurring_harvest=bool(data.get("multiHarvest", False)),
            harvest_interval_days=harvest_interval
        )


def _int_or(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class SpeciesCatalog:
    """Read-only lookup of PlantSpecies by id."""

    def __init__(self, species: Optional[List[PlantSpecies]] = None):
        self._species: Dict[str, PlantSpecies] = {}
        for entry in species or []:
            if entry.species_id in self._species:
                Logger.warning("SpeciesCatalog", f"Duplicate species id '{entry.species_id}'; keeping the last one.")
            self._species[entry.species_id] = entry

    def get(self, species_id: str) -> Optional[PlantSpecies]:
        return self._species.get(species_id)

    def __contains__(self, species_id: str) -> bool:
        return species_id in self._species

    def __len__(self) -> int:
        return len(self._species)

    def ids(self) -> List[str]:
        return sorted(self._species.keys())

    def all(self) -> List[PlantSpecies]:
        return [self._species[sid] for sid in self.ids()]

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> 'SpeciesCatalog':
        species = [PlantSpecies.from_dict(r) for r in records if isinstance(r, dict)]
        return cls([s for s in species if s is not None])


def load_species_catalog(path: str = SPECIES_FILE) -> SpeciesCatalog:
    """Loads the species database, falling back to the built-in list."""
    if not os.path.exists(path):
        Logger.warning("SpeciesCatalog", f"Species file not found at {path}; using built-in species.")
        return SpeciesCatalog.from_records(DEFAULT_PLANT_SPECIES)

    try:
        with open(path, 'r') as f:
            records = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        Logger.error("SpeciesCatalog", f"Error reading species file {path}: {e}. Using built-in species.")
        return SpeciesCatalog.from_records(DEFAULT_PLANT_SPECIES)

    if isinstance(records, dict):
        records = records.get("species", [])
    if not isinstance(records, list):
        Logger.error("SpeciesCatalog", f"Species file {path} must hold a list; using built-in species.")
        return SpeciesCatalog.from_records(DEFAULT_PLANT_SPECIES)

    catalog = SpeciesCatalog.from_records(records)
    Logger.info("SpeciesCatalog", f"Loaded {len(catalog)} plant species from {path}.")
    return catalog
