"""Scroll List - eased scrolling and highlight fade driven by ease-value.

Exercises EaseValue, EaseValueMultiple and FrameLoop in a pygame window.

Controls:
  Up/Down     Move the selection (the list scrolls to keep it visible)
  PgUp/PgDn   Jump ten rows
  Home/End    Jump to the first / last row
  L           Toggle linear / ease_out scrolling
  R           Reset scroll instantly to the selection
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from ease_value import EaseValue, EaseValueMultiple, FrameLoop

# Timing
FPS = 60

# Layout
SCREEN_W = 480
SCREEN_H = 360
ROW_H = 32
STATUS_H = 28
VIEW_H = SCREEN_H - STATUS_H

# Colors
BG_COLOR = (20, 20, 30)
ROW_BG = (30, 30, 45)
ROW_ALT_BG = (35, 35, 52)
HIGHLIGHT = (60, 220, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scroll List - ease-value visual demo")
    p.add_argument("--rows", type=int, default=100, help="Number of rows (default: 100)")
    p.add_argument("--force", type=float, default=0.15, help="Scroll force (default: 0.15)")
    p.add_argument("--verbose", action="store_true", help="Log ease-value debug output")
    args = p.parse_args()
    args.rows = max(1, args.rows)
    return args


class ListState:
    """Selection plus the eased scroll offset and highlight alpha."""

    def __init__(self, rows: int, force: float) -> None:
        self.loop = FrameLoop(fps=FPS)
        self.rows = rows
        self.selected = 0
        self.events_seen = {"start": 0, "step": 0, "stop": 0}
        self._build(0, force, "ease_out")

    def _build(self, scroll: float, force: float, easing: str) -> None:
        self.scroll = EaseValue(
            scroll, force=force, precision=0.5, easing=easing, scheduler=self.loop
        )
        self.glow = EaseValue(255, force=0.2, precision=1, scheduler=self.loop)
        self.view = EaseValueMultiple(
            {"scroll": self.scroll, "glow": self.glow}, scheduler=self.loop
        )
        for name in self.events_seen:
            self.view.on(name, lambda value, name=name: self._count(name))

    def _count(self, name: str) -> None:
        self.events_seen[name] += 1

    def select(self, index: int) -> None:
        index = max(0, min(self.rows - 1, index))
        if index == self.selected:
            return
        self.selected = index
        self.glow.reset(64)
        self.view.to({"scroll": self._scroll_target(), "glow": 255})

    def snap(self) -> None:
        self.view.reset({"scroll": self._scroll_target()})

    def toggle_easing(self) -> str:
        easing = "ease_out" if self.scroll.options.easing == "linear" else "linear"
        scroll = self.scroll.value
        self.view.destroy()
        self._build(scroll, 1.0 if easing == "linear" else 0.15, easing)
        return easing

    def _scroll_target(self) -> float:
        """Smallest scroll change that keeps the selected row in view."""
        current = self.scroll.value_target or 0
        top = self.selected * ROW_H
        bottom = top + ROW_H
        if top < current:
            return top
        if bottom > current + VIEW_H:
            return bottom - VIEW_H
        return current


def draw_rows(surface: pygame.Surface, font: pygame.font.Font, state: ListState) -> None:
    offset = state.scroll.value or 0
    first = max(0, int(offset // ROW_H))
    last = min(state.rows, int((offset + VIEW_H) // ROW_H) + 1)

    for i in range(first, last):
        y = i * ROW_H - offset
        bg = ROW_ALT_BG if i % 2 else ROW_BG
        pygame.draw.rect(surface, bg, (0, y, SCREEN_W, ROW_H))
        if i == state.selected:
            glow = pygame.Surface((SCREEN_W, ROW_H), pygame.SRCALPHA)
            glow.fill((*HIGHLIGHT, int(state.glow.value or 0) // 3))
            surface.blit(glow, (0, y))
        label = font.render(f"Row {i:03d}", True, TEXT_COLOR)
        surface.blit(label, (12, y + (ROW_H - label.get_height()) // 2))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, state: ListState) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    seen = state.events_seen
    text = (
        f"{state.scroll.options.easing}  scroll={state.scroll.value:.1f}  "
        f"start={seen['start']} step={seen['step']} stop={seen['stop']}"
    )
    color = TEXT_COLOR if state.view.is_running else TEXT_DIM
    surface.blit(font.render(text, True, color), (8, y + 6))


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Scroll List - ease-value demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = ListState(args.rows, args.force)
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_DOWN:
                    state.select(state.selected + 1)
                elif event.key == pygame.K_UP:
                    state.select(state.selected - 1)
                elif event.key == pygame.K_PAGEDOWN:
                    state.select(state.selected + 10)
                elif event.key == pygame.K_PAGEUP:
                    state.select(state.selected - 10)
                elif event.key == pygame.K_HOME:
                    state.select(0)
                elif event.key == pygame.K_END:
                    state.select(state.rows - 1)
                elif event.key == pygame.K_l:
                    state.toggle_easing()
                elif event.key == pygame.K_r:
                    state.snap()

        # --- Frame ---
        state.loop.tick()

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_rows(screen, font, state)
        draw_status_bar(screen, font, state)

        pygame.display.flip()

    state.view.destroy()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
