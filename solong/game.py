"""Game state and rules: moving the player, collecting and reaching the exit."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from solong.mapfile import GameMap

#: Side of one map tile in pixels.
TILE_SIZE = 32

FLOOR = "o"
WALL = "1"
PLAYER = "p"
CLOSED_EXIT = "e"
OPEN_EXIT = "E"
UNSORTED_COLLECTIBLE = "c"
#: The tile letters a collectible may be drawn as.
COLLECTIBLE_VARIANTS = "3BUGDIR5"

KEY_ESCAPE = 65307
KEY_A = 97
KEY_W = 119
KEY_D = 100
KEY_S = 115


class Direction(Enum):
    """A step on the grid as ``(dx, dy)``."""

    LEFT = (-1, 0)
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class KeyAction(Enum):
    """What a key press asks the game to do."""

    QUIT = "quit"
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    @property
    def direction(self) -> Direction | None:
        return _ACTION_DIRECTIONS.get(self)


_ACTION_DIRECTIONS = {
    KeyAction.LEFT: Direction.LEFT,
    KeyAction.UP: Direction.UP,
    KeyAction.RIGHT: Direction.RIGHT,
    KeyAction.DOWN: Direction.DOWN,
}

_KEYMAP = {
    KEY_ESCAPE: KeyAction.QUIT,
    KEY_A: KeyAction.LEFT,
    KEY_W: KeyAction.UP,
    KEY_D: KeyAction.RIGHT,
    KEY_S: KeyAction.DOWN,
}


def key_action(keycode: int) -> KeyAction | None:
    """Return the action bound to a key symbol, or None for other keys."""
    return _KEYMAP.get(keycode)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a key press.

    ``redraw`` lists ``(tile, x, y)`` grid cells whose picture changed.
    """

    moved: bool
    finished: bool = False
    quit: bool = False
    redraw: tuple[tuple[str, int, int], ...] = ()


def collectible_variant(height: int, length: int, y: int, x: int) -> str:
    """Return the tile letter used to draw a collectible at ``(x, y)``.

    The choice depends on the quarter of the map the cell lies in and on
    its distance from that quarter's outer edges.
    """
    area = height * length
    left = x * 2 < length
    top = y * 2 < height
    if left and top:
        numerator, denominator = area * 73, y * x
    elif top:
        numerator, denominator = area * 127, y * (length - x)
    elif left:
        numerator, denominator = area * 167, (height - y) * x
    else:
        numerator, denominator = area * 199, (height - y) * (length - x)
    if denominator <= 0:
        raise ValueError(f"cell ({x}, {y}) is on or outside the map border")
    return COLLECTIBLE_VARIANTS[(numerator // denominator) % 8]


def assign_collectibles(grid: list[list[str]]) -> None:
    """Replace, in place, every reached collectible with its drawn variant."""
    height = len(grid)
    length = len(grid[0]) if grid else 0
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == UNSORTED_COLLECTIBLE:
                row[x] = collectible_variant(height, length, y, x)


@dataclass
class Game:
    """A game in progress."""

    grid: list[list[str]]
    player: tuple[int, int]
    collectibles: int
    moves: int = 0
    exit_opened: bool = False

    @classmethod
    def from_map(cls, game_map: GameMap) -> Game:
        """Start a game on a validated map."""
        grid = [list(row) for row in game_map.grid]
        assign_collectibles(grid)
        return cls(grid=grid, player=game_map.player,
                   collectibles=game_map.counts.collectibles)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def length(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one tile in ``direction``."""
        x, y = self.player
        tx, ty = x + direction.dx, y + direction.dy
        target = self.grid[ty][tx]
        if target in (WALL, CLOSED_EXIT):
            return MoveResult(moved=False)
        if target == OPEN_EXIT:
            return MoveResult(moved=False, finished=True, redraw=((FLOOR, x, y),))
        if target != FLOOR:
            self.collectibles -= 1
        self.grid[ty][tx] = PLAYER
        self.grid[y][x] = FLOOR
        self.player = (tx, ty)
        return MoveResult(moved=True, redraw=((PLAYER, tx, ty), (FLOOR, x, y)))

    def open_exit(self) -> tuple[int, int] | None:
        """Open the closed exit; return its position, or None if none is closed."""
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row):
                if tile == CLOSED_EXIT:
                    row[x] = OPEN_EXIT
                    self.exit_opened = True
                    return x, y
        return None

    def handle_key(self, keycode: int) -> MoveResult | None:
        """Apply a key press; None when the key does nothing.

        Every movement key counts as a move, even when the step is blocked.
        Reaching the open exit ends the game without counting that step.
        """
        action = key_action(keycode)
        if action is None:
            return None
        if action is KeyAction.QUIT:
            return MoveResult(moved=False, quit=True)
        result = self.move(action.direction)
        if result.finished:
            return result
        if self.collectibles == 0 and not self.exit_opened:
            opened = self.open_exit()
            if opened is not None:
                result = replace(result, redraw=result.redraw + ((OPEN_EXIT, *opened),))
        self.moves += 1
        return result