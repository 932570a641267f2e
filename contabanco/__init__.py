"""Terminal bank account and movement manager with binary record files."""

__version__ = "0.1.0"
__all__ = ["__version__"]