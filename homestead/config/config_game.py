# homestead/config/config_game.py
"""
Configuration for core game systems, file paths, and debug settings.
"""
import os

# --- Directories and Files ---
# config_game.py is in homestead/config/, so we go up two levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_DIR = os.path.join(BASE_DIR, "data")
SAVE_GAME_DIR = os.path.join(DATA_DIR, "saves")
PLANT_DATA_DIR = os.path.join(DATA_DIR, "plants")
DEFAULT_SAVE_FILE = "default_save.json"

# --- Save System ---
SAVE_FORMAT_VERSION = "1.0.0"

# --- Logging ---
# 0=DEBUG, 1=INFO, 2=WARNING, 3=ERROR, 4=CRITICAL
LOG_LEVEL = 1
LOG_HISTORY_SIZE = 500

# --- Host Window ---
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 540
TARGET_FPS = 30
FONT_SIZE = 18
LINE_SPACING = 4
MAX_BUFFER_LINES = 50
WINDOW_TITLE = "Homestead"
START_REGION_ID = "farm"
