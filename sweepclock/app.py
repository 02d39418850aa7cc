"""pygame window hosting one clock face.

Controls:
  Drag slider / Left, Right   Scrub the sweep (manual mode only)
  Esc                         Quit
"""
from __future__ import annotations

import logging

import pygame

from sweepclock.canvas import PygameCanvas
from sweepclock.config import ClockConfig
from sweepclock.engine import ClockEngine
from sweepclock.renderer import build_frame

_logger = logging.getLogger(__name__)

SLIDER_H = 40
SLIDER_PAD = 16
SLIDER_STEP = 0.01
TRACK_COLOR = (60, 60, 80)
FILL_COLOR = (200, 200, 210)
KNOB_COLOR = (255, 255, 255)


class Slider:
    """Horizontal progress control in [0, 1]."""

    def __init__(self, rect: pygame.Rect, value: float = 0.0) -> None:
        self.rect = rect
        self.value = value
        self._dragging = False

    def _value_at(self, x: int) -> float:
        return min(max((x - self.rect.left) / self.rect.width, 0.0), 1.0)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update ``value`` from ``event``; return True when it changed."""
        old = self.value
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.inflate(0, SLIDER_PAD).collidepoint(event.pos):
                self._dragging = True
                self.value = self._value_at(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._dragging = False
        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self.value = self._value_at(event.pos[0])
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_LEFT:
                self.value = max(self.value - SLIDER_STEP, 0.0)
            elif event.key == pygame.K_RIGHT:
                self.value = min(self.value + SLIDER_STEP, 1.0)
        return self.value != old

    def draw(self, surface: pygame.Surface) -> None:
        cy = self.rect.centery
        pygame.draw.line(surface, TRACK_COLOR, (self.rect.left, cy), (self.rect.right, cy), 4)
        knob_x = self.rect.left + round(self.rect.width * self.value)
        pygame.draw.line(surface, FILL_COLOR, (self.rect.left, cy), (knob_x, cy), 4)
        pygame.draw.circle(surface, KNOB_COLOR, (knob_x, cy), 8)


def run(config: ClockConfig, fps: int = 60) -> None:
    pygame.init()
    manual = config.control == "manual"
    window_h = config.size + (SLIDER_H if manual else 0)
    screen = pygame.display.set_mode((config.size, window_h))
    pygame.display.set_caption("sweepclock")
    frame_clock = pygame.time.Clock()

    engine = ClockEngine(config)
    style = config.style()
    face_rect = pygame.Rect(config.padding, config.padding, config.face_size, config.face_size)
    canvas = PygameCanvas(screen.subsurface(face_rect))
    slider = None
    if manual:
        slider = Slider(
            pygame.Rect(SLIDER_PAD, config.size + SLIDER_H // 2 - 4, config.size - 2 * SLIDER_PAD, 8)
        )

    _logger.info(
        "starting %s clock, duration %d ms, %d tps",
        config.control, config.duration_ms, config.tps,
    )

    tick_interval = engine.clock.dt
    accumulator = 0.0
    laid_out = False
    running = True

    while running:
        accumulator += frame_clock.tick(fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif slider is not None and slider.handle_event(event):
                engine.set_progress(slider.value)

        # --- Tick ---
        while accumulator >= tick_interval:
            engine.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(config.background)
        canvas.draw(build_frame(engine.frame(), style))
        if slider is not None:
            slider.draw(screen)
        pygame.display.flip()

        # The viewport is only known after the first frame is on screen.
        if not laid_out:
            engine.layout(face_rect.width, face_rect.height)
            laid_out = True

    _logger.info("stopped after %d ticks", engine.clock.tick_number)
    pygame.quit()
