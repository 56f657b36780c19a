import pytest

from solong.game import (
    COLLECTIBLE_VARIANTS,
    KEY_A,
    KEY_D,
    KEY_ESCAPE,
    KEY_S,
    KEY_W,
    Direction,
    Game,
    KeyAction,
    assign_collectibles,
    collectible_variant,
    key_action,
)
from solong.mapfile import parse_map


def _game(rows):
    return Game.from_map(parse_map(rows))


def test_key_action_mapping():
    assert key_action(KEY_ESCAPE) is KeyAction.QUIT
    assert key_action(KEY_A) is KeyAction.LEFT
    assert key_action(KEY_W) is KeyAction.UP
    assert key_action(KEY_D) is KeyAction.RIGHT
    assert key_action(KEY_S) is KeyAction.DOWN
    assert key_action(0) is None


def test_action_directions():
    assert key_action(KEY_A).direction is Direction.LEFT
    assert key_action(KEY_S).direction is Direction.DOWN
    assert key_action(KEY_ESCAPE).direction is None
    down = key_action(KEY_S).direction
    assert (down.dx, down.dy) == (0, 1)


@pytest.mark.parametrize("y", range(1, 6))
@pytest.mark.parametrize("x", range(1, 8))
def test_collectible_variant_is_a_variant(y, x):
    assert collectible_variant(7, 9, y, x) in COLLECTIBLE_VARIANTS


def test_collectible_variant_on_border_raises():
    with pytest.raises(ValueError):
        collectible_variant(5, 5, 0, 0)


def test_assign_collectibles_replaces_only_collectibles():
    grid = [list("11111"), list("1cpc1"), list("1oce1"), list("11111")]
    before = [row[:] for row in grid]
    assign_collectibles(grid)
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if before[y][x] == "c":
                assert tile in COLLECTIBLE_VARIANTS
            else:
                assert tile == before[y][x]


def test_from_map_has_no_unsorted_collectibles():
    game = _game(["11111", "1PCE1", "11111"])
    assert all("c" not in row for row in game.grid)
    assert game.player == (1, 1)
    assert game.collectibles == 1


def test_collecting_opens_exit():
    game = _game(["11111", "1PCE1", "11111"])
    result = game.handle_key(KEY_D)
    assert result.moved
    assert not result.finished
    assert game.player == (2, 1)
    assert game.collectibles == 0
    assert game.grid[1][3] == "E"
    assert game.exit_opened
    assert game.moves == 1
    assert ("p", 2, 1) in result.redraw
    assert ("o", 1, 1) in result.redraw
    assert ("E", 3, 1) in result.redraw


def test_reaching_open_exit_finishes_without_counting():
    game = _game(["11111", "1PCE1", "11111"])
    game.handle_key(KEY_D)
    result = game.handle_key(KEY_D)
    assert result.finished
    assert game.moves == 1
    assert result.redraw == (("o", 2, 1),)


def test_blocked_by_wall_still_counts():
    game = _game(["11111", "1PCE1", "11111"])
    result = game.handle_key(KEY_A)
    assert not result.moved
    assert game.player == (1, 1)
    assert game.moves == 1
    assert result.redraw == ()


def test_closed_exit_blocks():
    game = _game(["11111", "1CPE1", "11111"])
    result = game.move(Direction.RIGHT)
    assert not result.moved
    assert not result.finished
    assert game.player == (2, 1)
    assert game.grid[1][3] == "e"


def test_quit_and_unknown_keys():
    game = _game(["11111", "1PCE1", "11111"])
    assert game.handle_key(KEY_ESCAPE).quit
    assert game.handle_key(0) is None
    assert game.moves == 0


def test_open_exit_only_once():
    game = _game(["11111", "1PCE1", "11111"])
    assert game.open_exit() == (3, 1)
    assert game.open_exit() is None