"""Game assembly, the per-frame update and the window loop."""

from __future__ import annotations

import argparse
import os
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field

from eggshot.menu import BUTTON, TEXT, MenuNode, spawn_menu
from eggshot.mouse_look import (
    Cursor,
    LookAngles,
    mouse_look_system,
    setup_cursor,
    unlock_cursor,
)
from eggshot.movement import apply_gravity, player_jump, player_movement_input
from eggshot.state import AppState
from eggshot.world import World, spawn_scene

WINDOW_SIZE = (1280, 720)


@dataclass(eq=False)
class Game:
    """Everything the running game holds between frames."""

    world: World
    menu: MenuNode
    look: LookAngles = field(default_factory=LookAngles)
    cursor: Cursor = field(default_factory=Cursor)
    state: AppState = AppState.MENU

    def update(
        self,
        dt: float,
        pressed: Collection[str] = frozenset(),
        just_pressed: Collection[str] = frozenset(),
        mouse_deltas: Iterable[tuple[float, float]] = (),
    ) -> None:
        """Advance one frame of dt seconds with the given input."""
        player_movement_input(self.world, pressed, dt)
        apply_gravity(self.world, dt)
        player_jump(self.world, just_pressed)
        self.world.spawn_camera()
        mouse_look_system(self.world, self.look, mouse_deltas)
        unlock_cursor(self.cursor, just_pressed)


def build_app() -> Game:
    """Create the game with its scene, grabbed cursor and menu in place."""
    cursor = Cursor()
    setup_cursor(cursor)
    return Game(world=spawn_scene(), menu=spawn_menu(), cursor=cursor)


def _rgb(color) -> tuple[int, int, int]:
    return tuple(round(c * 255) for c in (color or (0.0, 0.0, 0.0)))


def _text(pygame, node: MenuNode):
    size = round(node.font_size or 16.0)
    path = node.font if node.font and os.path.exists(node.font) else None
    return pygame.font.Font(path, size).render(node.text or "", True, _rgb(node.color))


def _draw_menu(pygame, screen, root: MenuNode) -> None:
    width, height = screen.get_size()
    screen.fill(_rgb(root.background))
    items = []
    for child in root.children:
        if child.kind == TEXT:
            surface = _text(pygame, child)
            w, h = surface.get_size()
            items.append((child, surface, w, h, h + round(child.margin_bottom)))
        elif child.kind == BUTTON:
            w, h = round(float(child.width[:-2])), round(float(child.height[:-2]))
            items.append((child, None, w, h, h))
    x = (width - sum(item[2] for item in items)) // 2
    for child, surface, w, h, outer in items:
        y = (height - outer) // 2
        if surface is not None:
            screen.blit(surface, (x, y))
        else:
            rect = pygame.Rect(x, y, w, h)
            pygame.draw.rect(screen, _rgb(child.background), rect)
            for label in child.children:
                text = _text(pygame, label)
                screen.blit(text, text.get_rect(center=rect.center))
        x += w


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    argparse.ArgumentParser(prog="eggshot", description="Run the eggshot game.").parse_args(argv)

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("eggshot")
        clock = pygame.time.Clock()
        game = build_app()
        held: set[str] = set()
        running = True
        while running:
            just_pressed: set[str] = set()
            deltas: list[tuple[float, float]] = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    name = pygame.key.name(event.key)
                    held.add(name)
                    just_pressed.add(name)
                elif event.type == pygame.KEYUP:
                    held.discard(pygame.key.name(event.key))
                elif event.type == pygame.MOUSEMOTION:
                    deltas.append((float(event.rel[0]), float(event.rel[1])))
            game.update(clock.tick(60) / 1000.0, held, just_pressed, deltas)
            pygame.mouse.set_visible(game.cursor.visible)
            pygame.event.set_grab(game.cursor.locked)
            _draw_menu(pygame, screen, game.menu)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())