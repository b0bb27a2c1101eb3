# homestead/config/config_time.py
"""
Configuration for the in-game clock and calendar.
"""

# --- Core Time System Settings ---
TIME_REAL_SECONDS_PER_GAME_DAY = 900  # 15 real minutes = 1 game day
TIME_DAY_END_HOUR = 23    # Clock stops here until the player sleeps
TIME_DAY_START_HOUR = 6   # Sleeping wakes the player at this hour
TIME_SEASON_LENGTH_DAYS = 28
TIME_STARTING_SEASON = 0  # 0: Spring, 1: Summer, 2: Fall, 3: Winter
TIME_STARTING_YEAR = 1

TIME_SEASONS_PER_YEAR = 4
TIME_SEASON_NAMES = ["Spring", "Summer", "Fall", "Winter"]

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY

# Wall-clock jitter below this is ignored by Clock.tick
TIME_TICK_MIN_INTERVAL_MS = 1000

# Placeholders: {year} {month} {day} {hour} {minute} {season}
TIME_DISPLAY_FORMAT = "Year {year} - {month}/{day} {hour}:{minute}"

# --- Contextual Pause Sources ---
PAUSE_CONTEXT_MENU = "menu"
PAUSE_CONTEXT_BATTLE = "battle"
