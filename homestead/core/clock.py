# homestead/core/clock.py
"""
Core system for managing in-game time, date, and seasons.

The clock owns a single counter, ``total_minutes``, and converts elapsed
wall-clock time into game minutes. Sub-minute remainders are carried
between ticks so no real time is lost to rounding. Everything else
(day, season, year, hour, minute) is derived from the counter on demand.
"""
import math
import time
from typing import Any, Dict, Optional

from homestead.config import (
    MINUTES_PER_DAY, MINUTES_PER_HOUR, TIME_DISPLAY_FORMAT, TIME_TICK_MIN_INTERVAL_MS
)
from homestead.core.event_system import EventSystem
from homestead.core.game_time import ClockConfig, GameTime
from homestead.core.pause_controller import PauseController
from homestead.utils.logger import Logger


def wall_clock_ms() -> float:
    return time.time() * 1000.0


class Clock:
    def __init__(self, config: Optional[ClockConfig] = None,
                 event_system: Optional[EventSystem] = None,
                 pause_controller: Optional[PauseController] = None,
                 time_source=None):
        self.config = config or ClockConfig.from_settings()
        self.event_system = event_system or EventSystem()
        self.pause_controller = pause_controller or PauseController()
        self.time_source = time_source or wall_clock_ms

        self.total_minutes: int = 0
        self.fractional_minute_carry: float = 0.0
        self.last_wall_clock_sample: float = self.time_source()
        self._day_limit_announced = False

        self.pause_controller.add_listener(self._on_pause_state_changed)
        Logger.info("Clock", f"Clock ready: {self.config.minutes_per_real_second:.3f} game minutes per real second.")

    # --- State queries ---

    @property
    def is_paused(self) -> bool:
        return self.pause_controller.is_paused()

    @property
    def paused_by_context(self) -> bool:
        return self.pause_controller.contextual_pause

    @property
    def visual_minutes(self) -> float:
        return self.total_minutes + self.fractional_minute_carry

    def get_current_time(self) -> GameTime:
        return GameTime.from_total_minutes(self.total_minutes, self.config)

    def is_at_day_limit(self) -> bool:
        if self.config.day_end_hour >= 24:
            return False
        hour = (self.total_minutes % MINUTES_PER_DAY) // MINUTES_PER_HOUR
        return hour >= self.config.day_end_hour

    def format_time(self, fmt: str = TIME_DISPLAY_FORMAT) -> str:
        now = self.get_current_time()
        return fmt.format(
            year=now.year,
            month=f"{now.month:02d}",
            day=f"{now.day:02d}",
            hour=f"{now.hour:02d}",
            minute=f"{now.minute:02d}",
            season=now.season_name
        )

    # --- Advancing time ---

    def tick(self, now_ms: float) -> int:
        """
        Advances game time by the wall-clock time since the previous sample.
        Returns the number of whole game minutes added.
        """
        elapsed_ms = now_ms - self.last_wall_clock_sample
        if elapsed_ms < 0:
            Logger.warning("Clock", f"Wall clock moved backwards by {-elapsed_ms:.0f}ms; re-baselining.")
            self.last_wall_clock_sample = now_ms
            return 0
        if elapsed_ms < TIME_TICK_MIN_INTERVAL_MS:
            return 0

        # Paused time is dropped, not banked for later
        if self.is_paused or self.is_at_day_limit():
            self.last_wall_clock_sample = now_ms
            return 0

        self.fractional_minute_carry += (elapsed_ms / 1000.0) * self.config.minutes_per_real_second
        whole_minutes = math.floor(self.fractional_minute_carry)
        self.fractional_minute_carry -= whole_minutes
        self.last_wall_clock_sample = now_ms

        if whole_minutes > 0:
            whole_minutes = self._advance(whole_minutes, stop_at_day_limit=True)

        self._publish_time_update()
        return whole_minutes

    def sleep_until_next_day_start(self, now_ms: Optional[float] = None) -> int:
        """Jumps to dayStartHour of the following day, crossing the day limit."""
        now_ms = self._resolve_now(now_ms)
        minute_of_day = self.total_minutes % MINUTES_PER_DAY
        minutes_to_advance = (MINUTES_PER_DAY - minute_of_day) + self.config.day_start_hour * MINUTES_PER_HOUR

        self.fractional_minute_carry = 0.0
        self.last_wall_clock_sample = now_ms
        if self.pause_controller.explicit_pause:
            self.pause_controller.set_explicit(False, now_ms)

        self._advance(minutes_to_advance, stop_at_day_limit=False)
        now = self.get_current_time()
        Logger.info("Clock", f"Slept {minutes_to_advance} minutes until {now.season_name} {now.day}, Year {now.year} {now.hour:02d}:{now.minute:02d}.")
        self._publish_time_update()
        return minutes_to_advance

    def _advance(self, minutes: int, stop_at_day_limit: bool) -> int:
        old_time = self.get_current_time()
        new_total = self.total_minutes + minutes
        reached_limit = False

        if stop_at_day_limit and self.config.day_end_hour < 24:
            day_start = self.total_minutes - (self.total_minutes % MINUTES_PER_DAY)
            limit_total = day_start + self.config.day_end_hour * MINUTES_PER_HOUR
            if self.total_minutes < limit_total <= new_total:
                new_total = limit_total
                self.fractional_minute_carry = 0.0
                reached_limit = True

        added = new_total - self.total_minutes
        self.total_minutes = new_total
        self._check_invariants()
        self._publish_boundary_events(old_time, self.get_current_time())

        if reached_limit and not self._day_limit_announced:
            self._day_limit_announced = True
            Logger.info("Clock", f"Day limit reached at {self.config.day_end_hour:02d}:00; time stops until sleep.")
            self.event_system.publish("day_limit_reached", self.get_current_time().to_dict())
        elif not self.is_at_day_limit():
            self._day_limit_announced = False
        return added

    def _publish_boundary_events(self, old_time: GameTime, new_time: GameTime) -> None:
        if new_time.absolute_day == old_time.absolute_day:
            return

        self.event_system.publish("day_changed", {
            "day": new_time.day, "season": new_time.season, "year": new_time.year,
            "absolute_day": new_time.absolute_day, "old_day": old_time.day
        })
        if (new_time.season, new_time.year) != (old_time.season, old_time.year):
            Logger.info("Clock", f"Season changed: {old_time.season_name} -> {new_time.season_name}.")
            self.event_system.publish("season_changed", {
                "season": new_time.season, "season_name": new_time.season_name,
                "year": new_time.year, "old_season": old_time.season
            })
        if new_time.year != old_time.year:
            Logger.info("Clock", f"Year changed: {old_time.year} -> {new_time.year}.")
            self.event_system.publish("year_changed", {"year": new_time.year, "old_year": old_time.year})

    def _publish_time_update(self) -> None:
        time_data = self.get_current_time().to_dict()
        time_data["visual_minutes"] = self.visual_minutes
        time_data["is_paused"] = self.is_paused
        self.event_system.publish("time_update", time_data)

    def _check_invariants(self) -> None:
        assert self.total_minutes >= 0, f"total_minutes went negative: {self.total_minutes}"
        if self.total_minutes < 0:
            Logger.error("Clock", f"total_minutes went negative ({self.total_minutes}); clamping to 0.")
            self.total_minutes = 0

    # --- Pause handling ---

    def pause(self, now_ms: Optional[float] = None) -> None:
        self.pause_controller.set_explicit(True, self._resolve_now(now_ms))

    def resume(self, now_ms: Optional[float] = None) -> None:
        now_ms = self._resolve_now(now_ms)
        self.pause_controller.set_explicit(False, now_ms)
        self.last_wall_clock_sample = now_ms

    def _on_pause_state_changed(self, paused: bool, now_ms: Optional[float]) -> None:
        if not paused:
            self.last_wall_clock_sample = self._resolve_now(now_ms)
        self.event_system.publish("time_resumed" if not paused else "time_paused", {
            "total_minutes": self.total_minutes,
            "contexts": self.pause_controller.active_contexts()
        })

    def _resolve_now(self, now_ms: Optional[float]) -> float:
        return self.time_source() if now_ms is None else now_ms

    # --- Persistence ---

    def restore(self, total_minutes: int, is_paused: bool = False, now_ms: Optional[float] = None) -> None:
        """Replaces the runtime state, e.g. after loading a save."""
        now_ms = self._resolve_now(now_ms)
        self.total_minutes = int(total_minutes)
        self._check_invariants()
        self.fractional_minute_carry = 0.0
        self.last_wall_clock_sample = now_ms
        self._day_limit_announced = self.is_at_day_limit()
        self.pause_controller.set_explicit(bool(is_paused), now_ms)
        self._publish_time_update()

    def reset(self, now_ms: Optional[float] = None) -> None:
        self.restore(0, False, now_ms)

    def to_save_data(self) -> Dict[str, Any]:
        return {
            "total_minutes": self.total_minutes,
            "is_paused": self.pause_controller.explicit_pause
        }

    def load_save_data(self, data: Optional[Dict[str, Any]], now_ms: Optional[float] = None) -> None:
        if not data or not isinstance(data, dict):
            Logger.info("Clock", "No saved time state found, using defaults.")
            self.reset(now_ms)
            return

        try:
            total_minutes = int(data.get("total_minutes", 0))
        except (TypeError, ValueError):
            Logger.error("Clock", f"Unreadable saved total_minutes {data.get('total_minutes')!r}; starting from 0.")
            total_minutes = 0
        self.restore(max(0, total_minutes), bool(data.get("is_paused", False)), now_ms)
        Logger.info("Clock", f"Loaded time state: {self.format_time()}.")
