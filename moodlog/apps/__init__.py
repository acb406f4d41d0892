"""Application entrypoints for the mood journal."""
