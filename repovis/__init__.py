"""Configuration, Mercurial and Subversion log parsing, and scene logic for repository history views."""

__version__ = "0.36.0"

__all__ = [
    "config",
    "key",
    "logs",
    "options",
    "pawn",
    "settings",
    "shell",
    "slider",
    "spline",
    "textbox",
]