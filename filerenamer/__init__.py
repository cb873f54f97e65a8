"""Batch file renaming: a model that previews target names and copies files, and a tkinter window."""

__version__ = "1.0.0"
__all__ = ["__version__"]