# homestead/core/input_handler.py
"""
Translates raw pygame keyboard events into typed commands and menu toggles.
"""
import pygame
from typing import TYPE_CHECKING, List

from homestead.config import COMMAND_HISTORY_SIZE

if TYPE_CHECKING:
    from homestead.core.game_manager import GameManager


class InputHandler:
    def __init__(self, game: 'GameManager'):
        self.game = game
        self.input_text = ""
        self.command_history: List[str] = []
        self.history_index = -1

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN: return

        if event.key == pygame.K_ESCAPE:
            self.game.toggle_menu()
        elif event.key in [pygame.K_RETURN, pygame.K_KP_ENTER]:
            if self.input_text:
                self.game.process_command(self.input_text)
                self.command_history.append(self.input_text)
                if len(self.command_history) > COMMAND_HISTORY_SIZE:
                    self.command_history.pop(0)
                self.history_index = -1
                self.input_text = ""
        elif event.key == pygame.K_BACKSPACE:
            self.input_text = self.input_text[:-1]
        elif event.key == pygame.K_UP:
            self._navigate_history(1)
        elif event.key == pygame.K_DOWN:
            self._navigate_history(-1)
        elif event.key == pygame.K_TAB:
            suggestions = self.game.command_processor.get_command_suggestions(self.input_text.strip())
            if self.input_text.strip() and suggestions:
                self.input_text = suggestions[0]
        elif event.unicode and event.unicode.isprintable():
            self.input_text += event.unicode

    def _navigate_history(self, direction: int) -> None:
        if not self.command_history: return
        if direction > 0: self.history_index = min(self.history_index + 1, len(self.command_history) - 1)
        else: self.history_index = max(self.history_index - 1, -1)
        self.input_text = self.command_history[-(self.history_index + 1)] if self.history_index >= 0 else ""
