"""Meditation script authoring service."""

__version__ = "0.1.0"
