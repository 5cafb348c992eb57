from __future__ import annotations
import logging
import os
import sys
from enum import Enum, auto
from pathlib import Path
from typing import Optional

import pygame

from .config import (
    BLACK, FPS, HIGH_SCORE_FILE, MAGENTA, RED, SCREEN_HEIGHT, SCREEN_WIDTH, WHITE, YELLOW,
    GameConfig,
)
from .controls import DIR_KEYS, SwipeTracker
from .highscore import HighScoreStore
from .render import Renderer
from .simulation import EventKind, Simulation


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAMEOVER = auto()


class App:
    def __init__(self, config: Optional[GameConfig] = None, store: Optional[HighScoreStore] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("PACMAN PARADOX")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)
        self.swipe = SwipeTracker()

        if store is None:
            store = HighScoreStore(Path.home() / HIGH_SCORE_FILE)
        self.sim = Simulation(config, store=store)
        self.state = GameState.MENU
        self.new_high_score = False
        self.running = True

    # --- RUN CONTROL ---

    def start_game(self):
        self.sim.start_run()
        self.renderer.clear_effects()
        self.new_high_score = False
        self.state = GameState.PLAYING

    def toggle_pause(self):
        self.sim.toggle_pause()
        self.state = GameState.PAUSED if self.sim.paused else GameState.PLAYING

    def show_main_menu(self):
        self.sim.end_run()
        self.state = GameState.MENU

    # --- INPUT ---

    def handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.running = False
            elif e.type == pygame.KEYDOWN:
                self.handle_key(e.key)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                self.swipe.begin(e.pos)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self.handle_swipe(self.swipe.end(e.pos))
            elif e.type == pygame.FINGERDOWN:
                self.swipe.begin((e.x * SCREEN_WIDTH, e.y * SCREEN_HEIGHT))
            elif e.type == pygame.FINGERUP:
                self.handle_swipe(self.swipe.end((e.x * SCREEN_WIDTH, e.y * SCREEN_HEIGHT)))

    def handle_key(self, key: int):
        if self.state == GameState.MENU:
            if key in (pygame.K_SPACE, pygame.K_RETURN):
                self.start_game()
            elif key == pygame.K_ESCAPE:
                self.running = False
        elif self.state == GameState.PLAYING:
            if key in (pygame.K_ESCAPE, pygame.K_p):
                self.toggle_pause()
            elif key in DIR_KEYS:
                self.sim.set_direction(DIR_KEYS[key])
        elif self.state == GameState.PAUSED:
            if key in (pygame.K_ESCAPE, pygame.K_p):
                self.toggle_pause()
            elif key == pygame.K_r:
                self.start_game()
            elif key == pygame.K_m:
                self.show_main_menu()
        elif self.state == GameState.GAMEOVER:
            if key in (pygame.K_SPACE, pygame.K_RETURN, pygame.K_r):
                self.start_game()
            elif key in (pygame.K_ESCAPE, pygame.K_m):
                self.show_main_menu()

    def handle_swipe(self, direction):
        if direction is not None and self.state == GameState.PLAYING:
            self.sim.set_direction(direction)

    # --- STATE HANDLERS ---

    def run_game(self, dt: float):
        for event in self.sim.step():
            self.renderer.handle_event(event)
            if event.kind is EventKind.GAME_OVER:
                self.state = GameState.GAMEOVER
                self.new_high_score = event.new_high_score
        self.renderer.update(dt)
        self.renderer.draw(self.sim.snapshot())

    def run_paused(self):
        self.renderer.draw(self.sim.snapshot())
        self.renderer.draw_overlay(BLACK, 160)
        self.renderer.draw_text_centered("PAUSED", SCREEN_HEIGHT // 2 - 40, YELLOW, self.renderer.big_font)
        self.renderer.draw_text_centered("P / ESC: RESUME", SCREEN_HEIGHT // 2 + 20, WHITE)
        self.renderer.draw_text_centered("R: RESTART   M: MENU", SCREEN_HEIGHT // 2 + 50, WHITE)

    def run_gameover(self):
        snap = self.sim.snapshot()
        self.renderer.draw(snap)
        self.renderer.draw_overlay(RED)
        self.renderer.draw_text_centered("GAME OVER", SCREEN_HEIGHT // 2 - 40, YELLOW, self.renderer.big_font)
        self.renderer.draw_text_centered(f"FINAL SCORE: {snap.score}", SCREEN_HEIGHT // 2 + 20, WHITE)
        if self.new_high_score:
            self.renderer.draw_text_centered("NEW HIGH SCORE!", SCREEN_HEIGHT // 2 + 60, YELLOW)
        else:
            self.renderer.draw_text_centered(f"HIGH SCORE: {self.sim.high_score}", SCREEN_HEIGHT // 2 + 60, MAGENTA)
        self.renderer.draw_text_centered("SPACE: PLAY AGAIN   M: MENU", SCREEN_HEIGHT // 2 + 120, WHITE)

    def run(self):
        """Main game loop"""
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.handle_events()

            if self.state == GameState.MENU:
                self.renderer.draw_menu(self.sim.high_score)
            elif self.state == GameState.PLAYING:
                self.run_game(dt)
            elif self.state == GameState.PAUSED:
                self.run_paused()
            elif self.state == GameState.GAMEOVER:
                self.run_gameover()

            pygame.display.flip()

        self.sim.end_run()
        pygame.quit()


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------

def main():
    logging.basicConfig(
        level=os.environ.get("PACMAN_PARADOX_LOG", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 40)
    print("       PACMAN PARADOX")
    print("=" * 40)
    print()
    print("Your past movements become enemies.")
    print("Controls: WASD, Arrow Keys or swipe")
    print("ESC / P: Pause")
    print()
    App().run()
    sys.exit(0)
