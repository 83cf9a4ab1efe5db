"""Core configuration, constants and logging helpers."""
