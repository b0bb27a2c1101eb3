# homestead/core/game_manager.py
"""
The session context. Builds one of every subsystem, wires them together,
and owns the per-frame update and the pygame host loop.
"""
import pygame
from typing import Any, Dict, List, Optional

from homestead.commands.command_system import CommandProcessor
from homestead.config import (
    DEFAULT_SAVE_FILE, MAX_BUFFER_LINES, PAUSE_CONTEXT_BATTLE, PAUSE_CONTEXT_MENU,
    SAVE_GAME_DIR, SCREEN_HEIGHT, SCREEN_WIDTH, SPECIES_FILE, START_REGION_ID,
    TARGET_FPS, WINDOW_TITLE, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE
)
from homestead.core.clock import Clock, wall_clock_ms
from homestead.core.event_system import EventSystem
from homestead.core.game_time import ClockConfig, GameTime
from homestead.core.input_handler import InputHandler
from homestead.core.pause_controller import PauseController
from homestead.garden.growth import GrowthEngine
from homestead.garden.registry import PlantRegistry
from homestead.garden.species import load_species_catalog
from homestead.ui.renderer import Renderer
from homestead.utils.logger import Logger
from homestead.world.save_manager import SaveManager

# Registers every command handler
import homestead.commands  # noqa: F401


class GameManager:
    def __init__(self, save_file: str = DEFAULT_SAVE_FILE,
                 clock_settings: Optional[Dict[str, Any]] = None,
                 species_file: str = SPECIES_FILE,
                 save_dir: str = SAVE_GAME_DIR,
                 time_source=None):
        self.time_source = time_source or wall_clock_ms

        self.event_system = EventSystem()
        self.pause_controller = PauseController()
        self.clock = Clock(ClockConfig.from_settings(**(clock_settings or {})),
                           self.event_system, self.pause_controller, self.time_source)
        self.catalog = load_species_catalog(species_file)
        self.growth_engine = GrowthEngine(self.clock.config.season_length_days, self.event_system)
        self.plant_registry = PlantRegistry(self.catalog, self.clock, self.growth_engine, self.event_system)
        self.command_processor = CommandProcessor()

        self.save_manager = SaveManager(save_dir)
        self.save_manager.register_participant("time", self.clock.to_save_data, self.clock.load_save_data)
        self.save_manager.register_participant("garden", self.plant_registry.to_save_data, self.plant_registry.load_save_data)

        self.current_save_file = save_file
        self.active_region_id = START_REGION_ID
        self.selected_plant_id: Optional[str] = None
        self.menu_open = False
        self.in_battle = False
        self.message_buffer: List[str] = []

        self._subscribe_to_events()

    # --- Per-frame update ---

    def update(self, now_ms: Optional[float] = None) -> GameTime:
        """Advances the clock, then updates the plants in the active region from one time snapshot."""
        now_ms = self.time_source() if now_ms is None else now_ms
        self.clock.tick(now_ms)
        return self.refresh_active_region()

    def refresh_active_region(self) -> GameTime:
        current = self.clock.get_current_time()
        self.plant_registry.update_active_region(self.active_region_id, current)
        return current

    # --- Contextual pauses ---

    def open_menu(self) -> None:
        if self.menu_open: return
        self.menu_open = True
        self.pause_controller.push_context(PAUSE_CONTEXT_MENU, self.time_source())

    def close_menu(self) -> None:
        if not self.menu_open: return
        self.menu_open = False
        self.pause_controller.pop_context(PAUSE_CONTEXT_MENU, self.time_source())

    def toggle_menu(self) -> None:
        if self.menu_open: self.close_menu()
        else: self.open_menu()
        self.add_message(f"{FORMAT_HIGHLIGHT}{'Menu opened. Time is paused.' if self.menu_open else 'Menu closed.'}{FORMAT_RESET}")

    def start_battle(self) -> None:
        if self.in_battle: return
        self.in_battle = True
        self.pause_controller.push_context(PAUSE_CONTEXT_BATTLE, self.time_source())

    def end_battle(self) -> None:
        if not self.in_battle: return
        self.in_battle = False
        self.pause_controller.pop_context(PAUSE_CONTEXT_BATTLE, self.time_source())

    # --- Session state ---

    def change_region(self, region_id: str) -> None:
        if region_id == self.active_region_id: return
        Logger.info("GameManager", f"Active region: {self.active_region_id} -> {region_id}")
        self.active_region_id = region_id
        self.selected_plant_id = self._last_plant_in_region()
        self.refresh_active_region()

    def new_game(self) -> None:
        Logger.info("GameManager", "Starting a new game.")
        self.save_manager.new_game()
        self.active_region_id = START_REGION_ID
        self.selected_plant_id = None
        self.message_buffer = []

    def save_game(self, filename: Optional[str] = None) -> bool:
        filename = filename or self.current_save_file
        if not self.save_manager.save(filename):
            return False
        self.current_save_file = filename
        return True

    def load_game(self, filename: Optional[str] = None) -> bool:
        filename = filename or self.current_save_file
        if not self.save_manager.load(filename):
            return False
        self.current_save_file = filename
        self.selected_plant_id = self._last_plant_in_region()
        self.refresh_active_region()
        return True

    def _last_plant_in_region(self) -> Optional[str]:
        plants = self.plant_registry.plants_in_region(self.active_region_id)
        return plants[-1].instance_id if plants else None

    # --- Commands and messages ---

    def process_command(self, text: str) -> Optional[str]:
        self.add_message(f"> {text}")
        context = {"game": self, "command_processor": self.command_processor}
        command_result = self.command_processor.process_input(text, context)
        if command_result:
            self.add_message(command_result)
        return command_result

    def add_message(self, message: str) -> None:
        if not message: return
        self.message_buffer.append(message)
        if len(self.message_buffer) > MAX_BUFFER_LINES:
            self.message_buffer.pop(0)

    def _subscribe_to_events(self) -> None:
        self.event_system.subscribe("day_changed", self._on_day_changed)
        self.event_system.subscribe("season_changed", self._on_season_changed)
        self.event_system.subscribe("day_limit_reached", self._on_day_limit_reached)
        self.event_system.subscribe("harvest_ready_changed", self._on_harvest_ready_changed)

    def _on_day_changed(self, event_type: str, data: Dict[str, Any]) -> None:
        self.add_message(f"{FORMAT_TITLE}A new day begins: {self.clock.format_time()}{FORMAT_RESET}")

    def _on_season_changed(self, event_type: str, data: Dict[str, Any]) -> None:
        self.add_message(f"{FORMAT_TITLE}{data.get('season_name', 'A new season')} has arrived.{FORMAT_RESET}")

    def _on_day_limit_reached(self, event_type: str, data: Dict[str, Any]) -> None:
        self.add_message("It's getting late. You should get some sleep.")

    def _on_harvest_ready_changed(self, event_type: str, data: Dict[str, Any]) -> None:
        if not data.get("ready"): return
        species = self.catalog.get(data.get("species_id", ""))
        name = species.display_name if species else data.get("species_id")
        self.add_message(f"{FORMAT_HIGHLIGHT}Your {name} ({data.get('instance_id')}) is ready to harvest.{FORMAT_RESET}")

    # --- Host loop ---

    def run(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        frame_clock = pygame.time.Clock()
        renderer = Renderer(screen, self)
        input_handler = InputHandler(self)
        self.add_message(f"Welcome to {WINDOW_TITLE}. Type 'help' to begin.")

        running = True
        while running:
            frame_clock.tick(TARGET_FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    input_handler.handle_event(event)

            self.update()
            pygame.display.set_caption(f"{WINDOW_TITLE} - {self.clock.format_time()}")
            renderer.draw(input_handler.input_text)

        pygame.quit()
