# tests/fixtures.py
import json
import os
import shutil
import sys
import tempfile
import unittest
from typing import Any, Dict, List, Optional, Tuple

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'homestead'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from homestead.core.game_manager import GameManager
from homestead.core.game_time import GameTime
from homestead.utils.logger import Logger, LogLevel

# Small, fast-growing species so tests can reach the final stage in a few days
TEST_SPECIES = [
    {"id": "carrot", "name": "Carrot", "stages": 3, "daysPerStage": 1,
     "seasons": [0, 1, 2], "multiHarvest": False},
    {"id": "turnip", "name": "Turnip", "stages": 3, "daysPerStage": 3,
     "seasons": [0], "multiHarvest": False},
    {"id": "berry", "name": "Berry Bush", "stages": 3, "daysPerStage": 1,
     "seasons": [0, 1], "multiHarvest": True, "harvestInterval": 3},
    {"id": "winter_kale", "name": "Winter Kale", "stages": 2, "daysPerStage": 2,
     "seasons": [3], "multiHarvest": False},
]


class FakeWallClock:
    """Stands in for the real wall clock; tests move it by hand."""
    def __init__(self, start_ms: float = 1_000_000.0):
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> float:
        self.now_ms += ms
        return self.now_ms


class GardenTestBase(unittest.TestCase):
    """Base class for all game tests. Builds a headless session per test."""

    clock_settings: Optional[Dict[str, Any]] = None

    def setUp(self):
        """Runs before EVERY test function."""
        Logger.set_level(LogLevel.CRITICAL)
        Logger.clear_history()

        self.temp_dir = tempfile.mkdtemp()
        self.species_file = os.path.join(self.temp_dir, "species.json")
        with open(self.species_file, 'w') as f:
            json.dump(TEST_SPECIES, f)
        self.save_dir = os.path.join(self.temp_dir, "saves")

        self.wall = FakeWallClock()
        self.game = GameManager(
            save_file="test_save.json",
            clock_settings=self.clock_settings,
            species_file=self.species_file,
            save_dir=self.save_dir,
            time_source=self.wall
        )
        self.clock = self.game.clock
        self.engine = self.game.growth_engine
        self.registry = self.game.plant_registry
        self.events = self.game.event_system
        self.received: List[Tuple[str, Any]] = []

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    # --- Helpers ---

    def record_events(self, *event_types: str) -> None:
        """Appends (event_type, data) to self.received for each listed event."""
        for event_type in event_types:
            self.events.subscribe(event_type, self._record)

    def _record(self, event_type: str, data: Any) -> None:
        self.received.append((event_type, data))

    def received_types(self) -> List[str]:
        return [event_type for event_type, _ in self.received]

    def set_date(self, day: int, season: int = 0, year: int = 1, hour: int = 6, minute: int = 0) -> GameTime:
        """Moves the clock to a calendar date and runs one garden update."""
        total = GameTime.compose_total_minutes(self.clock.config, year, season, day, hour, minute)
        self.clock.restore(total, now_ms=self.wall())
        return self.game.refresh_active_region()

    def tick_seconds(self, seconds: float) -> int:
        return self.clock.tick(self.wall.advance(seconds * 1000.0))

    def assertMessageContains(self, substring: str):
        """Custom helper to check if the game printed specific text."""
        all_text = "\n".join(self.game.message_buffer)
        self.assertIn(substring, all_text, f"Expected message '{substring}' not found in buffer.")
