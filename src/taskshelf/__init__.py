"""taskshelf: JSON-file record store behind a console task list and library catalog."""

__version__ = "0.1.0"
