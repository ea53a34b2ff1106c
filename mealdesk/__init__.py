"""Reserve a daily meal at a dining hall from the terminal or from Python."""

__version__ = "0.1.0"
__all__ = ["__version__"]