import argparse
import json
import os

from homestead.config import DATA_DIR, DEFAULT_SAVE_FILE, SAVE_GAME_DIR
from homestead.core.game_manager import GameManager
from homestead.utils.logger import Logger

def main():
    parser = argparse.ArgumentParser(description='Homestead farming game')
    parser.add_argument('--save', '-s', type=str, default=DEFAULT_SAVE_FILE,
                        help='Save game file to load/save (default: default_save.json)')
    parser.add_argument('--clock-config', type=str, default=None,
                        help='Optional JSON file overriding the clock settings')
    args = parser.parse_args()

    create_initial_directories()
    game = GameManager(args.save, clock_settings=load_clock_settings(args.clock_config))
    game.load_game(args.save)
    game.run()
    game.save_game()

def load_clock_settings(path):
    if not path: return None
    try:
        with open(path, 'r') as f:
            settings = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        Logger.error("Main", f"Could not read clock settings from {path}: {e}")
        return None
    if not isinstance(settings, dict):
        Logger.error("Main", f"Clock settings in {path} must be a JSON object.")
        return None
    return settings

def create_initial_directories():
    for path in (DATA_DIR, SAVE_GAME_DIR):
        os.makedirs(path, exist_ok=True)

if __name__ == "__main__":
    main()
