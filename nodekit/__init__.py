"""Event emitters, observers, text, path, date, console, file, filesystem and HTTP helpers."""

__version__ = "0.1.0"