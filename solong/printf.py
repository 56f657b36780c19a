"""A small printf with the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _to_uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _in_base16(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def _convert(conversion: str, args: list) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX":
        return ""
    if not args:
        raise TypeError(f"not enough arguments for %{conversion}")
    value = args.pop(0)
    if conversion == "c":
        return value if isinstance(value, str) else chr(value & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        address = (value or 0) & 0xFFFFFFFFFFFFFFFF
        return "(nil)" if address == 0 else "0x" + _in_base16(address, _LOWER_HEX)
    if conversion in "di":
        return str(_to_int32(value))
    if conversion == "u":
        return str(_to_uint32(value))
    digits = _LOWER_HEX if conversion == "x" else _UPPER_HEX
    return _in_base16(_to_uint32(value), digits)


def format_printf(fmt: str, *args) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``.

    An unknown conversion character is dropped together with its ``%``;
    a ``%`` at the very end is kept as it is.
    """
    pending = list(args)
    out = []
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char == "%" and i + 1 < len(fmt):
            out.append(_convert(fmt[i + 1], pending))
            i += 2
        else:
            out.append(char)
            i += 1
    return "".join(out)


def ft_printf(fmt: str, *args) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)