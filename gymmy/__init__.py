"""Gym member register with file storage, an in-memory coach roster, and console menus."""

__version__ = "0.1.0"