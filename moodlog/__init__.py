"""Mood journal service: entry store, HTTP API and LLM-backed mood insights."""

__version__ = "0.1.0"
