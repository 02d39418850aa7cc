"""pygame backend executing renderer draw commands."""
from __future__ import annotations

from typing import Iterable

import pygame

from sweepclock.renderer import DrawCommand, GradientOverlay, LineCommand
from sweepclock.types import Color

BLEND_FLAGS: dict[str, int] = {
    "add": pygame.BLEND_RGB_ADD,
    "subtract": pygame.BLEND_RGB_SUB,
    "multiply": pygame.BLEND_RGB_MULT,
    "lighten": pygame.BLEND_RGB_MAX,
    "darken": pygame.BLEND_RGB_MIN,
}


def gradient_surface(size: tuple[int, int], top: Color, bottom: Color) -> pygame.Surface:
    """Vertical linear gradient from ``top`` to ``bottom``."""
    width, height = size
    surface = pygame.Surface(size)
    span = max(height - 1, 1)
    for y in range(height):
        t = y / span
        color = tuple(round(a + (b - a) * t) for a, b in zip(top, bottom))
        pygame.draw.line(surface, color, (0, y), (width - 1, y))
    return surface


class PygameCanvas:
    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._overlays: dict[tuple[tuple[int, int], Color, Color], pygame.Surface] = {}

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def clear(self, color: Color) -> None:
        self._surface.fill(color)

    def draw(self, commands: Iterable[DrawCommand]) -> None:
        for command in commands:
            if isinstance(command, LineCommand):
                self._draw_line(command)
            else:
                self._draw_overlay(command)

    def _draw_line(self, line: LineCommand) -> None:
        width = round(line.width)
        if width <= 0:
            return
        pygame.draw.line(self._surface, line.color, line.start, line.end, width)
        if line.round_cap:
            radius = width / 2
            pygame.draw.circle(self._surface, line.color, line.start, radius)
            pygame.draw.circle(self._surface, line.color, line.end, radius)

    def _draw_overlay(self, overlay: GradientOverlay) -> None:
        key = (overlay.size, overlay.top, overlay.bottom)
        gradient = self._overlays.get(key)
        if gradient is None:
            gradient = gradient_surface(overlay.size, overlay.top, overlay.bottom)
            self._overlays[key] = gradient
        self._surface.blit(gradient, (0, 0), special_flags=BLEND_FLAGS[overlay.blend_mode])
