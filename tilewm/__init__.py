"""Tiling window manager logic: layouts, size hints, monitors, tags, rules,
status codes, process ancestry, autostart scripts and a file-testing command."""

__version__ = "0.1.0"