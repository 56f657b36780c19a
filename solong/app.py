"""The windowed game: drawing tiles with pygame and the command entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import TILE_SIZE, Game  # noqa: E402
from solong.mapfile import MapError, load_map  # noqa: E402
from solong.printf import ft_printf  # noqa: E402
from solong.xpm import XpmError, XpmImage, read_xpm  # noqa: E402

#: Tile letter to the XPM file that pictures it.
TILE_FILES = {
    "o": "0.xpm",
    "1": "1.xpm",
    "e": "e.xpm",
    "E": "E.xpm",
    "3": "3.xpm",
    "B": "B.xpm",
    "U": "U.xpm",
    "G": "G.xpm",
    "D": "D.xpm",
    "I": "I.xpm",
    "R": "R.xpm",
    "5": "5.xpm",
    "p": "P.xpm",
}

_X_ESCAPE = 65307


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height))
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            surface.set_at((x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
    return surface


def load_tiles(assets_dir: str | Path) -> dict[str, pygame.Surface]:
    """Load every tile picture from ``assets_dir``."""
    base = Path(assets_dir)
    return {tile: _to_surface(read_xpm(base / name)) for tile, name in TILE_FILES.items()}


class Renderer:
    """Draws map tiles onto a surface."""

    def __init__(self, surface: pygame.Surface, tiles: Mapping[str, pygame.Surface]):
        self.surface = surface
        self.tiles = dict(tiles)

    def draw_tile(self, tile: str, x: int, y: int) -> None:
        """Draw ``tile`` at grid cell ``(x, y)``; unknown tiles draw nothing."""
        picture = self.tiles.get(tile)
        if picture is not None:
            self.surface.blit(picture, (x * TILE_SIZE, y * TILE_SIZE))

    def draw_all(self, game: Game) -> None:
        """Draw the whole map."""
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                self.draw_tile(tile, x, y)


def _keycode(key: int) -> int:
    return _X_ESCAPE if key == pygame.K_ESCAPE else key


def run(game: Game, assets_dir: str | Path = "assets") -> None:
    """Open the window and play until the player quits or reaches the exit."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.length * TILE_SIZE, game.height * TILE_SIZE))
        pygame.display.set_caption("So_long")
        renderer = Renderer(screen, load_tiles(assets_dir))
        renderer.draw_all(game)
        pygame.display.flip()
        ft_printf("0\n")
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            result = game.handle_key(_keycode(event.key))
            if result is None:
                continue
            if result.quit:
                return
            for tile, x, y in result.redraw:
                renderer.draw_tile(tile, x, y)
            pygame.display.flip()
            if result.finished:
                ft_printf("Your score is %d\n", game.moves)
                return
            ft_printf("%d\n", game.moves)
    finally:
        pygame.quit()


def _error(message: str) -> int:
    sys.stdout.write(f"Error\n{message}\n")
    sys.stdout.flush()
    return 1


def main(argv: list[str] | None = None) -> int:
    """Play the map file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _error("You need to include a .ber file")
    try:
        game = Game.from_map(load_map(args[0]))
        run(game, "assets")
    except (MapError, XpmError) as exc:
        return _error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())