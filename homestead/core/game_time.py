# homestead/core/game_time.py
"""
Value types for the in-game calendar.

Every calendar field is derived from a single counter, the number of game
minutes since the epoch. Nothing here is mutable.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from homestead.config import (
    MINUTES_PER_DAY, MINUTES_PER_HOUR, TIME_DAY_END_HOUR, TIME_DAY_START_HOUR,
    TIME_REAL_SECONDS_PER_GAME_DAY, TIME_SEASON_LENGTH_DAYS, TIME_SEASON_NAMES,
    TIME_SEASONS_PER_YEAR, TIME_STARTING_SEASON, TIME_STARTING_YEAR
)
from homestead.utils.logger import Logger


@dataclass(frozen=True)
class CalendarDate:
    """A day on the calendar. ``day`` counts from 1 within its season."""
    day: int
    season: int
    year: int

    def to_dict(self) -> Dict[str, int]:
        return {"day": self.day, "season": self.season, "year": self.year}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['CalendarDate']:
        if not data or not isinstance(data, dict):
            return None
        return cls(
            day=int(data.get("day", 1)),
            season=int(data.get("season", 0)),
            year=int(data.get("year", 1))
        )


@dataclass(frozen=True)
class ClockConfig:
    real_seconds_per_game_day: float = TIME_REAL_SECONDS_PER_GAME_DAY
    day_end_hour: int = TIME_DAY_END_HOUR
    day_start_hour: int = TIME_DAY_START_HOUR
    season_length_days: int = TIME_SEASON_LENGTH_DAYS
    starting_season: int = TIME_STARTING_SEASON
    starting_year: int = TIME_STARTING_YEAR

    @property
    def minutes_per_real_second(self) -> float:
        return MINUTES_PER_DAY / self.real_seconds_per_game_day

    @property
    def days_per_year(self) -> int:
        return self.season_length_days * TIME_SEASONS_PER_YEAR

    @classmethod
    def from_settings(cls, **overrides: Any) -> 'ClockConfig':
        """
        Builds a config from the time constants plus optional overrides.
        Invalid values are replaced with their defaults, never raised.
        """
        settings = {
            "real_seconds_per_game_day": TIME_REAL_SECONDS_PER_GAME_DAY,
            "day_end_hour": TIME_DAY_END_HOUR,
            "day_start_hour": TIME_DAY_START_HOUR,
            "season_length_days": TIME_SEASON_LENGTH_DAYS,
            "starting_season": TIME_STARTING_SEASON,
            "starting_year": TIME_STARTING_YEAR,
        }
        for key, value in overrides.items():
            if key not in settings:
                Logger.warning("ClockConfig", f"Ignoring unknown clock setting '{key}'.")
                continue
            settings[key] = value

        real_seconds = _as_number(settings["real_seconds_per_game_day"])
        if real_seconds is None or real_seconds <= 0:
            real_seconds = _clamped("real_seconds_per_game_day", settings["real_seconds_per_game_day"], TIME_REAL_SECONDS_PER_GAME_DAY)

        end_hour = _as_int(settings["day_end_hour"])
        if end_hour is None or not 1 <= end_hour <= 24:
            end_hour = _clamped("day_end_hour", settings["day_end_hour"], TIME_DAY_END_HOUR)

        start_hour = _as_int(settings["day_start_hour"])
        if start_hour is None or not 0 <= start_hour <= 23 or start_hour >= end_hour:
            start_hour = _clamped("day_start_hour", settings["day_start_hour"], TIME_DAY_START_HOUR)
            # Very short days can sit below the default start hour
            if start_hour >= end_hour:
                start_hour = 0

        season_length = _as_int(settings["season_length_days"])
        if season_length is None or season_length < 1:
            season_length = _clamped("season_length_days", settings["season_length_days"], TIME_SEASON_LENGTH_DAYS)

        starting_season = _as_int(settings["starting_season"])
        if starting_season is None or not 0 <= starting_season < TIME_SEASONS_PER_YEAR:
            starting_season = _clamped("starting_season", settings["starting_season"], TIME_STARTING_SEASON)

        starting_year = _as_int(settings["starting_year"])
        if starting_year is None or starting_year < 1:
            starting_year = _clamped("starting_year", settings["starting_year"], TIME_STARTING_YEAR)

        return cls(
            real_seconds_per_game_day=float(real_seconds),
            day_end_hour=end_hour,
            day_start_hour=start_hour,
            season_length_days=season_length,
            starting_season=starting_season,
            starting_year=starting_year
        )


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None

def _as_int(value: Any) -> Optional[int]:
    number = _as_number(value)
    if number is None or number != int(number):
        return None
    return int(number)

def _clamped(name: str, bad_value: Any, default: Any) -> Any:
    Logger.warning("ClockConfig", f"Invalid {name}={bad_value!r}, using default {default}.")
    return default


@dataclass(frozen=True)
class GameTime:
    total_minutes: int
    day: int
    season: int
    year: int
    hour: int
    minute: int

    @classmethod
    def from_total_minutes(cls, total_minutes: int, config: ClockConfig) -> 'GameTime':
        season_length = config.season_length_days
        elapsed_days = total_minutes // MINUTES_PER_DAY
        # Shift so the epoch lands on the first day of the starting season
        shifted_days = elapsed_days + config.starting_season * season_length
        minute_of_day = total_minutes % MINUTES_PER_DAY
        return cls(
            total_minutes=total_minutes,
            day=shifted_days % season_length + 1,
            season=(shifted_days // season_length) % TIME_SEASONS_PER_YEAR,
            year=config.starting_year + shifted_days // config.days_per_year,
            hour=minute_of_day // MINUTES_PER_HOUR,
            minute=minute_of_day % MINUTES_PER_HOUR
        )

    @staticmethod
    def compose_total_minutes(config: ClockConfig, year: int, season: int, day: int,
                              hour: int = 0, minute: int = 0) -> int:
        """Inverse of from_total_minutes."""
        season_length = config.season_length_days
        shifted_days = ((year - config.starting_year) * config.days_per_year
                        + season * season_length + (day - 1))
        elapsed_days = shifted_days - config.starting_season * season_length
        return elapsed_days * MINUTES_PER_DAY + hour * MINUTES_PER_HOUR + minute

    def to_total_minutes(self, config: ClockConfig) -> int:
        return self.compose_total_minutes(config, self.year, self.season, self.day, self.hour, self.minute)

    @property
    def absolute_day(self) -> int:
        """1-based count of days since the epoch."""
        return self.total_minutes // MINUTES_PER_DAY + 1

    @property
    def season_name(self) -> str:
        return TIME_SEASON_NAMES[self.season]

    @property
    def month(self) -> int:
        return self.season * 3 + 1

    def date(self) -> CalendarDate:
        return CalendarDate(day=self.day, season=self.season, year=self.year)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_minutes": self.total_minutes,
            "day": self.day, "season": self.season, "year": self.year,
            "hour": self.hour, "minute": self.minute,
            "month": self.month, "season_name": self.season_name,
            "time_str": f"{self.hour:02d}:{self.minute:02d}",
            "date_str": f"{self.season_name} {self.day}, Year {self.year}"
        }
