"""A mood diary: emoji-tagged notes in SQLite, relative dates and desktop notifications."""

__version__ = "0.1.0"

__all__ = ["__version__"]