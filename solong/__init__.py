"""A tile game: collect every item on a .ber map and reach the exit."""

__version__ = "0.1.0"

__all__ = ["__version__"]