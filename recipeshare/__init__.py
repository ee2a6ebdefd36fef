"""In-memory recipe sharing service."""
