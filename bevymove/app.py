"""The application: asset loading, state hooks, frame updates and the main loop."""

from __future__ import annotations

import argparse
from collections.abc import Container
from functools import partial
from pathlib import Path

import pygame

from bevymove.player import DOWN, LEFT, RIGHT, UP, Player, player_input, player_movement, spawn_player
from bevymove.states import AppState, StateMachine
from bevymove.ui import MenuAction, UiElement, boot_screen, draw_elements, element_at, main_menu
from bevymove.window import INITIAL_SIZE, TITLE, window_size_for

BACKGROUND_FILE = "background.png"
CLEAR_COLOR = (43, 44, 47)
FPS_COLOR = (0, 255, 0)
FPS_FONT_SIZE = 22
FPS_REFRESH_MS = 100
FRAME_RATE = 60


class AssetLoadError(Exception):
    """Raised when a required asset cannot be read."""


def load_background(asset_dir: str | Path) -> pygame.Surface:
    """Load the menu background image from ``asset_dir``."""
    path = Path(asset_dir) / BACKGROUND_FILE
    if not path.is_file():
        raise AssetLoadError(f"missing asset: {path}")
    try:
        return pygame.image.load(str(path))
    except pygame.error as exc:
        raise AssetLoadError(f"cannot load {path}: {exc}") from exc


class Game:
    """All state of a running application, independent of the display."""

    def __init__(self, asset_dir: str | Path = "assets") -> None:
        self.asset_dir = Path(asset_dir)
        self.state = StateMachine(AppState.BOOTING_APP)
        self.window_size: tuple[int, int] = INITIAL_SIZE
        self.elements: list[UiElement] = []
        self.background: pygame.Surface | None = None
        self.player: Player | None = None
        self.camera: tuple[float, float] | None = None
        self.error: AssetLoadError | None = None
        self.running = True
        self._loaded = False

        for state in AppState:
            self.state.on_enter(state, partial(self._resize, state))
        self.state.on_enter(AppState.BOOTING_APP, self._enter_boot)
        self.state.on_exit(AppState.BOOTING_APP, self._clear_screen)
        self.state.on_enter(AppState.MAIN_MENU, self._enter_menu)
        self.state.on_exit(AppState.MAIN_MENU, self._clear_screen)
        self.state.on_enter(AppState.IN_GAME, self._setup)

    def _resize(self, state: AppState) -> None:
        size = window_size_for(state)
        if size is not None:
            self.window_size = size

    def _enter_boot(self) -> None:
        self.elements = boot_screen(*self.window_size)

    def _enter_menu(self) -> None:
        self.elements = main_menu(*self.window_size)

    def _clear_screen(self) -> None:
        self.elements = []

    def _setup(self) -> None:
        self.camera = (0.0, 0.0)
        self.player = spawn_player()

    def _load_assets(self) -> None:
        self._loaded = True
        try:
            self.background = load_background(self.asset_dir)
        except AssetLoadError as exc:
            self.error = exc
            self.state.set(AppState.ERROR_SCREEN)
        else:
            self.state.set(AppState.MAIN_MENU)

    def boot(self) -> AppState:
        """Enter the booting state and return it; assets load on the next update."""
        self.state.start()
        return self.state.current

    def click(self, pos: tuple[float, float]) -> MenuAction | None:
        """Handle a released mouse button at ``pos``; return the action taken."""
        if self.state.current is not AppState.MAIN_MENU:
            return None
        element = element_at(self.elements, pos)
        if element is None:
            return None
        if element.action is MenuAction.PLAY:
            self.state.set(AppState.IN_GAME)
        elif element.action is MenuAction.EXIT:
            self.running = False
        return element.action

    def update(self, pressed: Container[str] = ()) -> AppState:
        """Advance one frame with the held direction keys; return the current state."""
        self.state.apply()
        current = self.state.current
        if current is AppState.BOOTING_APP and not self._loaded:
            self._load_assets()
        elif current is AppState.IN_GAME and self.player is not None:
            player_input(self.player, pressed)
            player_movement(self.player, *self.window_size)
        return current

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Map world coordinates (y up, origin at the camera) to pixels."""
        cam_x, cam_y = self.camera or (0.0, 0.0)
        width, height = self.window_size
        return (width / 2 + (x - cam_x), height / 2 - (y - cam_y))

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current state onto ``surface``."""
        surface.fill(CLEAR_COLOR)
        if self.elements:
            draw_elements(surface, self.elements, self.background)
        if self.state.current is AppState.IN_GAME and self.player is not None:
            pygame.draw.circle(
                surface,
                self.player.color,
                self.to_screen(self.player.x, self.player.y),
                self.player.radius,
            )


def _held_directions() -> set[str]:
    keys = pygame.key.get_pressed()
    mapping = {pygame.K_LEFT: LEFT, pygame.K_RIGHT: RIGHT, pygame.K_UP: UP, pygame.K_DOWN: DOWN}
    return {name for key, name in mapping.items() if keys[key]}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Move a circle around with the arrow keys.")
    parser.add_argument("--assets", default="assets", help="directory holding background.png")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        game = Game(args.assets)
        screen = pygame.display.set_mode(game.window_size)
        pygame.display.set_caption(TITLE)
        game.boot()

        clock = pygame.time.Clock()
        fps_font = pygame.font.Font(None, FPS_FONT_SIZE)
        fps_text = ""
        last_refresh = -FPS_REFRESH_MS

        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    game.click(event.pos)
            if not game.running:
                break

            game.update(_held_directions())
            if screen.get_size() != game.window_size:
                screen = pygame.display.set_mode(game.window_size)

            game.draw(screen)
            now = pygame.time.get_ticks()
            if now - last_refresh >= FPS_REFRESH_MS:
                fps_text = f"FPS: {clock.get_fps():.2f}"
                last_refresh = now
            screen.blit(fps_font.render(fps_text, True, FPS_COLOR), (0, 0))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())