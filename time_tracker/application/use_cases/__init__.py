"""Application use cases (task lifecycle, users)."""
