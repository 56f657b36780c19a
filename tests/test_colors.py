import pytest

from solong.colors import TRANSPARENT, lookup_color


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("ghost white", 0xF8F8FF),
        ("navy", 0x80),
        ("thistle4", 0x8B7B8B),
        ("gray50", 0x7F7F7F),
    ],
)
def test_known_colors(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == TRANSPARENT


@pytest.mark.parametrize("name", ["RED", "Red", "rEd"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color("red")


def test_mixed_case_with_space():
    assert lookup_color("Ghost White") == lookup_color("ghostwhite")


def test_first_duplicate_wins():
    # "dark slate" and "light slate" appear several times with different values.
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


@pytest.mark.parametrize("level", range(101))
def test_gray_levels_have_equal_channels(level):
    value = lookup_color(f"gray{level}")
    red, green, blue = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    assert red == green == blue


def test_gray_levels_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize(
    ("spaced", "joined"),
    [
        ("navy blue", "navyblue"),
        ("lawn green", "lawngreen"),
        ("hot pink", "hotpink"),
        ("dark red", "darkred"),
        ("light green", "lightgreen"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("name", ["", "notacolor", "red5", "#ff0000"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        lookup_color(name)


@pytest.mark.parametrize("name", ["snow", "azure3", "orchid", "gold", "cyan4"])
def test_values_fit_in_24_bits(name):
    assert 0 <= lookup_color(name) <= 0xFFFFFF