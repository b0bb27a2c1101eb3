# homestead/ui/renderer.py
"""
Draws the host window: a status bar with the clock readout, the message
buffer, and the input line. Inline format codes select the text color.
"""
import re
import pygame
from typing import TYPE_CHECKING, List, Tuple

from homestead.config import (
    BG_COLOR, COLOR_DEFAULT, DEFAULT_COLORS, FONT_FAMILY, FONT_SIZE, FORMAT_RESET,
    INPUT_BG_COLOR, LINE_SPACING, STATUS_BG_COLOR, TEXT_COLOR
)

if TYPE_CHECKING:
    from homestead.core.game_manager import GameManager

TAG_PATTERN = re.compile(r'(\[\[.*?\]\])')


class Renderer:
    def __init__(self, screen: pygame.Surface, game: 'GameManager'):
        self.screen = screen
        self.game = game
        self.font = pygame.font.SysFont(FONT_FAMILY, FONT_SIZE)
        self.line_height = self.font.get_linesize() + LINE_SPACING
        self.margin = 10

    def draw(self, input_text: str = "") -> None:
        self.screen.fill(BG_COLOR)
        width, height = self.screen.get_size()

        status_rect = pygame.Rect(0, 0, width, self.line_height + 6)
        pygame.draw.rect(self.screen, STATUS_BG_COLOR, status_rect)
        self.screen.blit(self.font.render(self._status_line(), True, TEXT_COLOR), (self.margin, 3))

        input_rect = pygame.Rect(0, height - self.line_height - 8, width, self.line_height + 8)
        pygame.draw.rect(self.screen, INPUT_BG_COLOR, input_rect)
        self.screen.blit(self.font.render("> " + input_text + "|", True, TEXT_COLOR), (self.margin, input_rect.y + 4))

        # Newest lines sit just above the input area
        lines = [line for message in self.game.message_buffer for line in message.split("\n")]
        y = input_rect.y - self.line_height
        for line in reversed(lines):
            if y < status_rect.bottom: break
            self._draw_segments(self._parse_segments(line), (self.margin, y))
            y -= self.line_height

        pygame.display.flip()

    def _status_line(self) -> str:
        clock = self.game.clock
        state = ""
        if clock.is_at_day_limit(): state = "  [late: sleep to continue]"
        elif clock.is_paused: state = "  [paused]"
        return f"{clock.format_time()}  {clock.get_current_time().season_name}  |  {self.game.active_region_id}{state}"

    def _draw_segments(self, segments: List[Tuple[str, str]], position: Tuple[int, int]) -> None:
        x, y = position
        color = COLOR_DEFAULT
        for kind, value in segments:
            if kind == 'format':
                color = COLOR_DEFAULT if value == FORMAT_RESET else DEFAULT_COLORS.get(value, COLOR_DEFAULT)
                continue
            surface = self.font.render(value, True, color)
            self.screen.blit(surface, (x, y))
            x += surface.get_width()

    def _parse_segments(self, text: str) -> List[Tuple[str, str]]:
        segments = []
        for part in TAG_PATTERN.split(text):
            if not part: continue
            if part.startswith('[[') and part.endswith(']]'):
                segments.append(('format', part))
            else:
                segments.append(('text', part))
        return segments
