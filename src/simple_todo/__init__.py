"""Single-screen to-do list with local key-value persistence."""

__version__ = "0.1.0"
