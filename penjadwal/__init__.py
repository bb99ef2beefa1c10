"""Hospital doctor shift scheduling: roster, monthly schedule, CSV files and menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]