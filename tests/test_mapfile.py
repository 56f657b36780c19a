import pytest

from solong.mapfile import (
    ElementCounts,
    MapError,
    check_closed,
    check_name,
    close_exit,
    count_elements,
    find_player,
    flood_fill,
    load_map,
    parse_map,
    read_rows,
)

SIMPLE = ["1111111", "1P0C0E1", "1111111"]


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="latin-1")
    return path


def test_check_name_accepts_ber():
    assert check_name("maps/level.ber") is None


def test_check_name_rejects_other_extension():
    with pytest.raises(MapError, match="Wrong file type"):
        check_name("map.txt")


def test_check_name_partial_match_is_accepted():
    # Only a name whose three last characters all differ is refused.
    assert check_name("map.bxx") is None


def test_read_rows_drops_final_newline(tmp_path):
    path = _write(tmp_path, "m.ber", "\n".join(SIMPLE) + "\n")
    assert read_rows(path) == SIMPLE


def test_read_rows_without_final_newline(tmp_path):
    path = _write(tmp_path, "m.ber", "\n".join(SIMPLE))
    assert read_rows(path) == SIMPLE


def test_read_rows_empty_file(tmp_path):
    path = _write(tmp_path, "m.ber", "")
    with pytest.raises(MapError, match="Empty file"):
        read_rows(path)


def test_read_rows_not_rectangular(tmp_path):
    path = _write(tmp_path, "m.ber", "11111\n1PCE1\n111\n")
    with pytest.raises(MapError, match="Not rectangular"):
        read_rows(path)


def test_read_rows_missing_file(tmp_path):
    with pytest.raises(MapError, match="Impossible to read the .ber file"):
        read_rows(tmp_path / "absent.ber")


def test_count_elements_totals_match_grid():
    counts = count_elements(SIMPLE)
    total = counts.void + counts.walls + counts.collectibles + counts.exits + counts.starts
    assert total == len(SIMPLE) * len(SIMPLE[0])
    assert (counts.collectibles, counts.exits, counts.starts) == (1, 1, 1)
    assert counts.void == SIMPLE[1].count("0")


def test_count_elements_wrong_symbol():
    with pytest.raises(MapError, match="Wrong symbol"):
        count_elements(["11111", "1PXE1", "11111"])


@pytest.mark.parametrize(
    "rows, message",
    [
        (["11111", "1P0E1", "11111"], "It requires at least one collectible"),
        (["11111", "1PCC1", "11111"], "It requires one exit"),
        (["111111", "1PCEE1", "111111"], "It requires one exit"),
        (["11111", "10CE1", "11111"], "It requires one start position"),
        (["111111", "1PCEP1", "111111"], "It requires one start position"),
    ],
)
def test_count_elements_requirements(rows, message):
    with pytest.raises(MapError, match=message):
        count_elements(rows)


def test_check_closed_accepts_walled_map():
    assert check_closed(SIMPLE) is None


@pytest.mark.parametrize(
    "rows",
    [
        ["1101111", "1P0C0E1", "1111111"],
        ["1111111", "0P0C0E1", "1111111"],
        ["1111111", "1P0C0E0", "1111111"],
        ["1111111", "1P0C0E1", "1111101"],
    ],
)
def test_check_closed_rejects_gaps(rows):
    with pytest.raises(MapError, match="Not closed"):
        check_closed(rows)


def test_find_player():
    x, y = find_player(SIMPLE)
    assert SIMPLE[y][x] == "P"


def test_flood_fill_marks_reachable_tiles():
    grid = [list(row) for row in SIMPLE]
    flood_fill(grid, find_player(SIMPLE))
    assert "".join(grid[1]) == "1pocoE1"
    assert grid[0] == list(SIMPLE[0])


def test_flood_fill_stops_at_walls():
    rows = ["111111", "1P1C01", "111111"]
    grid = [list(row) for row in rows]
    flood_fill(grid, (1, 1))
    assert "".join(grid[1]) == "1p1C01"


def test_close_exit_marks_first_exit():
    grid = [list(row) for row in SIMPLE]
    close_exit(grid)
    assert "".join(grid[1]).count("e") == 1
    assert not any("E" in row for row in grid)


def test_parse_map_result():
    game_map = parse_map(SIMPLE)
    assert game_map.rows == ["1111111", "1pocoe1", "1111111"]
    assert game_map.player == (1, 1)
    assert (game_map.length, game_map.height) == (7, 3)
    assert game_map.counts == count_elements(SIMPLE)


def test_parse_map_impossible_path():
    with pytest.raises(MapError, match="Impossible path"):
        parse_map(["111111", "1P1CE1", "111111"])


def test_parse_map_does_not_require_reachable_exit():
    game_map = parse_map(["111111", "1PC1E1", "111111"])
    assert game_map.rows[1] == "1pc1e1"


def test_parse_map_not_rectangular():
    with pytest.raises(MapError, match="Not rectangular"):
        parse_map(["1111111", "1P0C0E1", "11111"])


def test_load_map_round_trip(tmp_path):
    path = _write(tmp_path, "level.ber", "\n".join(SIMPLE) + "\n")
    game_map = load_map(path)
    assert game_map.rows == parse_map(SIMPLE).rows
    assert isinstance(game_map.counts, ElementCounts)
    assert game_map.counts.collectibles == 1


def test_load_map_checks_name_first(tmp_path):
    with pytest.raises(MapError, match="Wrong file type"):
        load_map(tmp_path / "level.txt")