"""Shared libraries for the mood journal service."""
