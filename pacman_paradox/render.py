from __future__ import annotations
import math
from typing import List, Optional, Tuple

import pygame

from .actors import MoverKind
from .config import (
    BLACK, CYAN, GREY, HUD_HEIGHT, MAGENTA, SCALE, SCREEN_HEIGHT, SCREEN_WIDTH, TILE_SIZE,
    WALL_BLUE, WHITE, YELLOW,
)
from .maze import Direction
from .simulation import EntityView, EventKind, GameEvent, Snapshot

CELL = TILE_SIZE * SCALE

DIR_ANGLES = {
    Direction.RIGHT: 0,
    Direction.UP: 90,
    Direction.LEFT: 180,
    Direction.DOWN: 270,
}


def cell_center(cell: Tuple[int, int]) -> Tuple[int, int]:
    return (cell[0] * CELL + CELL // 2, cell[1] * CELL + HUD_HEIGHT + CELL // 2)


class Renderer:
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font = pygame.font.SysFont("monospace", 18, bold=True)
        self.big_font = pygame.font.SysFont("monospace", 36, bold=True)
        self.mouth_angle = 0.0
        self.mouth_dir = 1
        # (color, seconds left)
        self.flash: Optional[Tuple[tuple, float]] = None
        self.banners: List[List] = []

    # --- TRANSIENT EFFECTS ---

    def handle_event(self, event: GameEvent):
        if event.kind is EventKind.SCREEN_FLASH:
            self.flash = (event.color, event.duration)
        elif event.kind is EventKind.CLONE_SPAWNED:
            self.banners.append([event.message, event.color, event.duration])

    def update(self, dt: float):
        if self.flash is not None:
            color, left = self.flash
            self.flash = (color, left - dt) if left - dt > 0 else None
        for banner in self.banners:
            banner[2] -= dt
        self.banners = [b for b in self.banners if b[2] > 0]

        self.mouth_angle += 0.3 * self.mouth_dir
        if self.mouth_angle >= 0.5 or self.mouth_angle <= 0:
            self.mouth_dir *= -1

    def clear_effects(self):
        self.flash = None
        self.banners = []

    # --- DRAWING ---

    def draw(self, snap: Snapshot):
        self.screen.fill(BLACK)
        self.draw_maze(snap)
        self.draw_pacman(snap.player)
        for pursuer in snap.pursuers:
            self.draw_ghost(pursuer)
        self.draw_ui(snap)
        self.draw_effects()

    def draw_maze(self, snap: Snapshot):
        for x, y in snap.walls:
            pygame.draw.rect(self.screen, WALL_BLUE, (x * CELL, y * CELL + HUD_HEIGHT, CELL, CELL))

        for cell in snap.dots:
            pygame.draw.circle(self.screen, YELLOW, cell_center(cell), max(2, CELL // 10))

        for cell in snap.power_pellets:
            pygame.draw.circle(self.screen, YELLOW, cell_center(cell), CELL // 5)

    def draw_pacman(self, player: EntityView):
        """Draw Pac-Man with mouth animation"""
        x, y = cell_center(player.cell)
        r = int(CELL * 0.4)
        pygame.draw.circle(self.screen, player.color, (x, y), r)

        if self.mouth_angle > 0:
            angle = math.degrees(self.mouth_angle)
            base_angle = DIR_ANGLES[player.heading]
            pts = [(x, y)]
            for a in (base_angle + angle, base_angle - angle):
                rad = math.radians(a)
                pts.append((x + math.cos(rad) * (r + 2), y - math.sin(rad) * (r + 2)))
            pygame.draw.polygon(self.screen, BLACK, pts)

    def draw_ghost(self, ghost: EntityView):
        x, y = cell_center(ghost.cell)
        r = int(CELL * 0.4)

        # Dome + skirt
        pygame.draw.circle(self.screen, ghost.color, (x, y - r // 3), r)
        pygame.draw.rect(self.screen, ghost.color, (x - r, y - r // 3, r * 2, int(r * 0.9)))

        # Clones have cyan eyes with magenta pupils
        if ghost.kind is MoverKind.CLONE:
            eye, pupil = CYAN, MAGENTA
        else:
            eye, pupil = WHITE, BLACK
        off_x = int(r * 0.3)
        eye_y = y - r // 3
        dx, dy = ghost.heading.dx * 2, ghost.heading.dy * 2
        for ex in (x - off_x, x + off_x):
            pygame.draw.circle(self.screen, eye, (ex, eye_y), max(2, int(r * 0.2)))
            pygame.draw.circle(self.screen, pupil, (ex + dx, eye_y + dy), max(1, int(r * 0.1)))

    def draw_ui(self, snap: Snapshot):
        """Draw score, time, high score and the recording/power/clone label"""
        score_txt = self.font.render(f"SCORE: {snap.score}", True, WHITE)
        self.screen.blit(score_txt, (10, 10))

        time_txt = self.font.render(f"TIME: {int(snap.elapsed)}s", True, WHITE)
        self.screen.blit(time_txt, (SCREEN_WIDTH // 2 - time_txt.get_width() // 2, 10))

        hi_txt = self.font.render(f"HIGH: {snap.high_score}", True, WHITE)
        self.screen.blit(hi_txt, (SCREEN_WIDTH - hi_txt.get_width() - 10, 10))

        status_txt = self.font.render(snap.status.text, True, snap.status.color)
        self.screen.blit(status_txt, (SCREEN_WIDTH // 2 - status_txt.get_width() // 2, 38))

    def draw_effects(self):
        if self.flash is not None:
            self.draw_overlay(self.flash[0], alpha=77)
        for i, (message, color, _) in enumerate(self.banners):
            self.draw_text_centered(message, SCREEN_HEIGHT // 2 + i * 44, color, self.big_font)

    def draw_text_centered(self, text: str, y: int, color=WHITE, font=None):
        if font is None:
            font = self.font
        surf = font.render(text, True, color)
        rect = surf.get_rect(center=(SCREEN_WIDTH // 2, y))
        self.screen.blit(surf, rect)

    def draw_overlay(self, color: tuple, alpha: int = 100):
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        overlay.set_alpha(alpha)
        overlay.fill(color)
        self.screen.blit(overlay, (0, 0))

    def draw_menu(self, high_score: int):
        self.screen.fill(BLACK)
        self.draw_text_centered("PACMAN PARADOX", 120, YELLOW, self.big_font)
        self.draw_text_centered("YOUR PAST BECOMES THE ENEMY", 170, MAGENTA)
        self.draw_text_centered(f"HIGH SCORE: {high_score}", 240, WHITE)
        self.draw_text_centered("ARROWS / WASD / SWIPE TO MOVE", 320, GREY)
        self.draw_text_centered("ESC OR P TO PAUSE", 350, GREY)
        self.draw_text_centered("PRESS SPACE TO START", 430, WHITE)
