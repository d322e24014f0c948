"""A falling-block puzzle game with SRS rotation, hold, ghost piece and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]