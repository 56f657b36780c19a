"""Reader for XPM pixmap images, the format of the game's tile graphics."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from solong.colors import TRANSPARENT, lookup_color

#: Pixel value stored for a transparent (``None``) colour.
TRANSPARENT_PIXEL = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]*)")
_MAX_COLOR_NAME = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: rows of 0xRRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    """Replace each comment outside double quotes with spaces."""
    in_quote = False
    i = 0
    while i <= len(text) - len(opener):
        if text[i] == '"':
            in_quote = not in_quote
        elif not in_quote and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:i] + " " * (stop - i) + text[stop:]
            i = stop
            continue
        i += 1
    return text


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    Comments are replaced by spaces, so the length of the text is kept.
    Block comments are removed first, then line comments together with
    the newline that ends them.
    """
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def parse_color(name: str, end: str | None) -> int:
    """Return the colour value for an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up among the named colours;
    an unknown name gives 0. ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name, 1)
        sign, digits = match.group(1), match.group(2)
        if not digits:
            return 0
        value = int(digits, 16)
        return -value if sign == "-" else value
    if end:
        name = f"{name} {end}"[:_MAX_COLOR_NAME]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what} line") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its string lines (header, colours, pixels)."""
    it = iter(lines)
    header = split_words(_next_line(it, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header values")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(it, "colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            c_index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour key 'c' in {line!r}") from None
        if c_index + 1 >= len(words):
            raise XpmError(f"missing colour after 'c' in {line!r}")
        name = words[c_index + 1]
        end = words[c_index + 2] if c_index + 2 < len(words) else None
        value = parse_color(name, end)
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = _next_line(it, "pixel")
        if len(line) < width * cpp:
            raise XpmError(f"pixel line too short: {line!r}")
        row = []
        for x in range(width):
            value = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(TRANSPARENT_PIXEL if value == TRANSPARENT else value)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def read_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))