import pygame
import pytest

from solong.app import TILE_FILES, Renderer, load_tiles, main
from solong.game import TILE_SIZE, Game
from solong.xpm import XpmError

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)

XPM = """/* XPM */
static char *tile[] = {
"2 2 1 1",
"a c #FF0000",
"aa",
"aa"};
"""


def _solid(color):
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    surface.fill(color)
    return surface


def _renderer(width, height):
    surface = pygame.Surface((width * TILE_SIZE, height * TILE_SIZE))
    surface.fill(BLACK)
    tiles = {"1": _solid(RED), "p": _solid(GREEN), "o": _solid(BLUE)}
    return Renderer(surface, tiles)


def test_draw_tile_places_picture_on_cell():
    renderer = _renderer(2, 2)
    renderer.draw_tile("p", 1, 0)
    assert renderer.surface.get_at((TILE_SIZE + 3, 3)) == GREEN
    assert renderer.surface.get_at((3, 3)) == BLACK


def test_draw_tile_unknown_draws_nothing():
    renderer = _renderer(1, 1)
    renderer.draw_tile("c", 0, 0)
    assert renderer.surface.get_at((5, 5)) == BLACK


def test_draw_all_draws_every_cell():
    renderer = _renderer(2, 2)
    game = Game(grid=[["1", "p"], ["o", "1"]], player=(1, 0), collectibles=0)
    renderer.draw_all(game)
    assert renderer.surface.get_at((1, 1)) == RED
    assert renderer.surface.get_at((TILE_SIZE + 1, 1)) == GREEN
    assert renderer.surface.get_at((1, TILE_SIZE + 1)) == BLUE
    assert renderer.surface.get_at((TILE_SIZE + 1, TILE_SIZE + 1)) == RED


def test_load_tiles(tmp_path):
    for name in TILE_FILES.values():
        (tmp_path / name).write_text(XPM)
    tiles = load_tiles(tmp_path)
    assert set(tiles) == set(TILE_FILES)
    assert tiles["p"].get_size() == (2, 2)
    assert tiles["1"].get_at((1, 1)) == RED


def test_load_tiles_missing_directory(tmp_path):
    with pytest.raises(XpmError):
        load_tiles(tmp_path / "absent")


def test_main_without_map(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\nYou need to include a .ber file\n"


def test_main_with_bad_symbol(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1PCX1\n11111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nWrong symbol\n"


def test_main_with_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().out == "Error\nImpossible to read the .ber file\n"


def test_main_not_rectangular(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1PCE1\n1111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nNot rectangular\n"