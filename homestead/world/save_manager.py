# homestead/world/save_manager.py
"""
Handles saving and loading of per-feature state to and from a single save slot.

Feature modules never touch the save file themselves. Each one owns a key
in the slot and either reads/writes it through initialize/get/set, or
registers as a participant so its state is collected on save and handed
back on load.
"""
import json
import os
import time
from typing import Any, Callable, Dict, Optional

from homestead.config import DEFAULT_SAVE_FILE, SAVE_FORMAT_VERSION, SAVE_GAME_DIR
from homestead.utils.logger import Logger


def compare_versions(v1: str, v2: str) -> int:
    """Returns 1, -1 or 0 comparing dotted version strings."""
    def parts(v: str):
        out = []
        for piece in str(v).split("."):
            try: out.append(int(piece))
            except ValueError: out.append(0)
        return (out + [0, 0, 0])[:3]

    p1, p2 = parts(v1), parts(v2)
    if p1 > p2: return 1
    if p1 < p2: return -1
    return 0


class SaveParticipant:
    def __init__(self, key: str, to_save: Callable[[], Any], from_save: Callable[[Optional[Any]], None]):
        self.key = key
        self.to_save = to_save
        self.from_save = from_save


class SaveManager:
    def __init__(self, save_dir: str = SAVE_GAME_DIR, version: str = SAVE_FORMAT_VERSION):
        self.save_dir = save_dir
        self.version = version
        self.entries: Dict[str, Dict[str, Any]] = {}
        self.participants: Dict[str, SaveParticipant] = {}

    # --- Key/value contract ---

    def initialize(self, key: str, default_value: Any) -> bool:
        """Stores ``default_value`` under ``key`` unless the key already has data."""
        if not key:
            Logger.error("SaveManager", "A key is required to initialize save data.")
            return False
        if key in self.entries:
            Logger.debug("SaveManager", f"Save key '{key}' already initialized.")
            return False
        self.entries[key] = {"version": self.version, "data": default_value}
        Logger.debug("SaveManager", f"Initialized save key '{key}'.")
        return True

    def get(self, key: str, default: Any = None) -> Any:
        entry = self.entries.get(key)
        if entry is None:
            return default
        return entry.get("data", default)

    def set(self, key: str, value: Any) -> bool:
        if not key:
            Logger.error("SaveManager", "A key is required to set save data.")
            return False
        if key not in self.entries:
            Logger.debug("SaveManager", f"Save key '{key}' not initialized, initializing now.")
        self.entries[key] = {"version": self.version, "data": value}
        return True

    def has(self, key: str) -> bool:
        return key in self.entries

    def clear(self) -> None:
        self.entries = {}

    # --- Participants ---

    def register_participant(self, key: str, to_save: Callable[[], Any],
                             from_save: Callable[[Optional[Any]], None]) -> None:
        self.participants[key] = SaveParticipant(key, to_save, from_save)

    def unregister_participant(self, key: str) -> None:
        self.participants.pop(key, None)

    def collect(self) -> None:
        """Asks every participant for its current state."""
        for key, participant in self.participants.items():
            self.set(key, participant.to_save())

    def distribute(self) -> None:
        """Hands every participant its stored state, or None when the slot has none."""
        for key, participant in self.participants.items():
            participant.from_save(self.get(key))

    def new_game(self) -> None:
        self.clear()
        self.distribute()

    # --- Slot files ---

    def save(self, filename: str = DEFAULT_SAVE_FILE) -> bool:
        """Saves every key to a JSON slot file."""
        save_path = self._resolve_path(filename)
        if not save_path: return False
        Logger.info("SaveManager", f"Saving game to {save_path}...")
        try:
            self.collect()
            save_data = {
                "save_format_version": self.version,
                "save_name": os.path.splitext(os.path.basename(save_path))[0],
                "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
                "plugins": self.entries,
            }
            os.makedirs(os.path.dirname(save_path), exist_ok=True)
            with open(save_path, 'w') as f: json.dump(save_data, f, indent=2, default=str)
            Logger.info("SaveManager", f"Game saved successfully to {save_path}.")
            return True
        except (OSError, TypeError, ValueError) as e:
            Logger.error("SaveManager", f"Error saving game: {e}")
            return False

    def load(self, filename: str = DEFAULT_SAVE_FILE) -> bool:
        """
        Loads a slot file and restores every participant.
        A missing file is a fresh start, not an error. An unreadable file
        leaves the current entries and participants untouched.
        """
        save_path = self._resolve_path(filename)
        if not save_path or not os.path.exists(save_path):
            Logger.info("SaveManager", f"Save file not found: {filename}. Starting new game.")
            self.new_game()
            return True

        Logger.info("SaveManager", f"Loading save game from {save_path}...")
        try:
            with open(save_path, 'r') as f: save_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            Logger.error("SaveManager", f"Critical Error loading save game '{filename}': {e}")
            return False

        entries = save_data.get("plugins") if isinstance(save_data, dict) else None
        if not isinstance(entries, dict):
            Logger.error("SaveManager", f"Save game '{filename}' has no readable plugin data.")
            return False

        self.entries = {}
        for key, entry in entries.items():
            if not isinstance(entry, dict) or "data" not in entry:
                Logger.warning("SaveManager", f"Skipping malformed save entry '{key}'.")
                continue
            entry_version = str(entry.get("version", "0.0.0"))
            if compare_versions(entry_version, self.version) != 0:
                Logger.warning("SaveManager", f"Version mismatch for '{key}': {entry_version} vs {self.version}")
            self.entries[key] = {"version": entry_version, "data": entry["data"]}

        self.distribute()
        Logger.info("SaveManager", f"Loaded {len(self.entries)} save keys from {save_path}.")
        return True

    def exists(self, filename: str) -> bool:
        save_path = self._resolve_path(filename)
        return bool(save_path) and os.path.exists(save_path)

    def delete(self, filename: str) -> bool:
        save_path = self._resolve_path(filename)
        if not save_path or not os.path.exists(save_path):
            return False
        try:
            os.remove(save_path)
            return True
        except OSError as e:
            Logger.error("SaveManager", f"Error deleting save '{filename}': {e}")
            return False

    def _resolve_path(self, filename: str) -> Optional[str]:
        safe_filename = "".join(c for c in filename if c.isalnum() or c in ('_', '-', '.'))
        safe_filename = safe_filename.lstrip(".")
        if not safe_filename:
            Logger.error("SaveManager", f"Invalid save file name '{filename}'.")
            return None
        if not safe_filename.endswith(".json"): safe_filename += ".json"
        return os.path.abspath(os.path.join(self.save_dir, safe_filename))
