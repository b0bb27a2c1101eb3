# homestead/config/config_garden.py
"""
Configuration for the gardening simulation: care tuning and default plant data.
"""
import os

from homestead.config.config_game import PLANT_DATA_DIR

SPECIES_FILE = os.path.join(PLANT_DATA_DIR, "species.json")

# --- Plant Instance Defaults ---
PLANT_INITIAL_WATER_LEVEL = 50
PLANT_INITIAL_QUALITY = 1.0

# --- Care Tuning ---
WATER_LEVEL_MAX = 100
WATER_DAILY_DECAY = 10
WATER_GAIN_PER_WATERING = 30
QUALITY_MIN = 1.0
QUALITY_MAX = 3.0
QUALITY_STEP = 0.5
FERTILIZER_YIELD_BONUS = 0.5
BASE_YIELD_SINGLE_HARVEST = 2
BASE_YIELD_RECURRING_HARVEST = 1

# --- Species Validation Limits ---
SPECIES_MIN_STAGES = 1
SPECIES_MAX_STAGES = 5
SPECIES_DEFAULT_STAGES = 3
SPECIES_DEFAULT_DAYS_PER_STAGE = 1
SPECIES_DEFAULT_HARVEST_INTERVAL = 3

# Used when the species file is missing or unreadable
DEFAULT_PLANT_SPECIES = [
    {"id": "carrot", "name": "Carrot", "stages": 3, "daysPerStage": 1,
     "seasons": [0, 1, 2], "multiHarvest": False},
    {"id": "potato", "name": "Potato", "stages": 3, "daysPerStage": 1,
     "seasons": [0, 1], "multiHarvest": False},
    {"id": "cabbage", "name": "Cabbage", "stages": 3, "daysPerStage": 2,
     "seasons": [0, 2], "multiHarvest": False},
    {"id": "morning_glory", "name": "Morning Glory", "stages": 3, "daysPerStage": 2,
     "seasons": [1], "multiHarvest": True, "harvestInterval": 3},
]
