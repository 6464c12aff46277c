"""Terminal naval battle game, solo or two players over TCP."""

__version__ = "1.0.0"
__all__ = ["__version__"]