# homestead/garden/plant.py
from dataclasses import dataclass
from typing import Any, Dict, Optional

from homestead.config import (
    PLANT_INITIAL_QUALITY, PLANT_INITIAL_WATER_LEVEL, QUALITY_MAX, QUALITY_MIN, WATER_LEVEL_MAX
)
from homestead.core.game_time import CalendarDate


@dataclass(frozen=True)
class HarvestResult:
    instance_id: str
    species_id: str
    yield_amount: int
    quality: float
    days_grown: int
    harvest_count: int
    remove_plant: bool  # True for single-harvest species


class PlantInstance:
    """
    One planted entity. ``planted_at`` is captured once from the clock and
    stored verbatim from then on, including across save/load.
    """
    def __init__(self, instance_id: str, species_id: str, region_id: str,
                 planted_at: CalendarDate,
                 growth_stage: int = 0,
                 water_level: int = PLANT_INITIAL_WATER_LEVEL,
                 quality: float = PLANT_INITIAL_QUALITY,
                 watered_today: bool = False,
                 is_fertilized: bool = False,
                 last_harvested_at: Optional[CalendarDate] = None,
                 harvest_count: int = 0,
                 projected_yield: int = 0,
                 last_care_date: Optional[CalendarDate] = None):
        self.instance_id = instance_id
        self.species_id = species_id
        self.region_id = region_id
        self.planted_at = planted_at
        self.growth_stage = growth_stage
        self.water_level = water_level
        self.quality = quality
        self.watered_today = watered_today
        self.is_fertilized = is_fertilized
        self.last_harvested_at = last_harvested_at
        self.harvest_count = harvest_count
        self.projected_yield = projected_yield
        # Day the watering window was last rolled over; drives daily decay
        self.last_care_date = last_care_date or planted_at
        # Derived each update, not persisted
        self.is_harvest_ready = False

    def __repr__(self) -> str:
        return (f"PlantInstance({self.instance_id!r}, species={self.species_id!r}, "
                f"region={self.region_id!r}, stage={self.growth_stage})")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "instance_id": self.instance_id,
            "species_id": self.species_id,
            "region_id": self.region_id,
            "planted_at": self.planted_at.to_dict(),
            "growth_stage": self.growth_stage,
            "water_level": self.water_level,
            "quality": self.quality,
            "watered_today": self.watered_today,
            "is_fertilized": self.is_fertilized,
            "last_harvested_at": self.last_harvested_at.to_dict() if self.last_harvested_at else None,
            "harvest_count": self.harvest_count,
            "projected_yield": self.projected_yield,
            "last_care_date": self.last_care_date.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['PlantInstance']:
        instance_id = data.get("instance_id")
        species_id = data.get("species_id")
        planted_at = CalendarDate.from_dict(data.get("planted_at"))
        if not instance_id or not species_id or not planted_at:
            return None

        return cls(
            instance_id=str(instance_id),
            species_id=str(species_id),
            region_id=str(data.get("region_id", "")),
            planted_at=planted_at,
            growth_stage=max(0, int(data.get("growth_stage", 0))),
            water_level=max(0, min(WATER_LEVEL_MAX, int(data.get("water_level", PLANT_INITIAL_WATER_LEVEL)))),
            quality=max(QUALITY_MIN, min(QUALITY_MAX, float(data.get("quality", PLANT_INITIAL_QUALITY)))),
            watered_today=bool(data.get("watered_today", False)),
            is_fertilized=bool(data.get("is_fertilized", False)),
            last_harvested_at=CalendarDate.from_dict(data.get("last_harvested_at")),
            harvest_count=max(0, int(data.get("harvest_count", 0))),
            projected_yield=int(data.get("projected_yield", 0)),
            last_care_date=CalendarDate.from_dict(data.get("last_care_date"))
        )
