# homestead/core/pause_controller.py
"""
Decides whether game time should currently advance.

Combines an explicit pause flag (PAUSE / RESUME commands) with any number
of contextual pauses (an open menu, a running battle). Contexts are
reference counted, so closing one menu while a battle is still running
keeps time stopped.
"""
from typing import Callable, Dict, List, Optional

from homestead.utils.logger import Logger


class PauseController:
    def __init__(self):
        self.explicit_pause: bool = False
        self.context_counts: Dict[str, int] = {}
        self.total_paused_ms: float = 0.0
        self._paused_since_ms: Optional[float] = None
        self._listeners: List[Callable[[bool, Optional[float]], None]] = []

    def add_listener(self, callback: Callable[[bool, Optional[float]], None]) -> None:
        """callback(is_paused, now_ms) runs on every paused/unpaused transition."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[bool, Optional[float]], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    @property
    def contextual_pause(self) -> bool:
        return any(count > 0 for count in self.context_counts.values())

    def is_paused(self) -> bool:
        return self.explicit_pause or self.contextual_pause

    def active_contexts(self) -> List[str]:
        return [name for name, count in self.context_counts.items() if count > 0]

    def set_explicit(self, paused: bool, now_ms: Optional[float] = None) -> None:
        was_paused = self.is_paused()
        self.explicit_pause = paused
        self._notify_if_changed(was_paused, now_ms)

    def push_context(self, name: str, now_ms: Optional[float] = None) -> None:
        """Registers one more open instance of a pausing context."""
        was_paused = self.is_paused()
        self.context_counts[name] = self.context_counts.get(name, 0) + 1
        Logger.debug("PauseController", f"Context '{name}' opened (depth {self.context_counts[name]}).")
        self._notify_if_changed(was_paused, now_ms)

    def pop_context(self, name: str, now_ms: Optional[float] = None) -> bool:
        """Closes one instance of a context. Unknown contexts are ignored."""
        if self.context_counts.get(name, 0) <= 0:
            Logger.warning("PauseController", f"Context '{name}' closed but was not open.")
            return False
        was_paused = self.is_paused()
        self.context_counts[name] -= 1
        if self.context_counts[name] == 0:
            del self.context_counts[name]
        Logger.debug("PauseController", f"Context '{name}' closed.")
        self._notify_if_changed(was_paused, now_ms)
        return True

    def clear_contexts(self, now_ms: Optional[float] = None) -> None:
        was_paused = self.is_paused()
        self.context_counts.clear()
        self._notify_if_changed(was_paused, now_ms)

    def reset(self) -> None:
        """Forget all pause state without notifying (new game)."""
        self.explicit_pause = False
        self.context_counts.clear()
        self.total_paused_ms = 0.0
        self._paused_since_ms = None

    def _notify_if_changed(self, was_paused: bool, now_ms: Optional[float]) -> None:
        paused = self.is_paused()
        if paused == was_paused:
            return

        if paused:
            self._paused_since_ms = now_ms
        else:
            if self._paused_since_ms is not None and now_ms is not None:
                self.total_paused_ms += max(0.0, now_ms - self._paused_since_ms)
            self._paused_since_ms = None

        Logger.info("PauseController", "Time paused." if paused else "Time resumed.")
        for callback in list(self._listeners):
            callback(paused, now_ms)
