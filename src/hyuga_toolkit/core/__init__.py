"""Core data models, error taxonomy and persistence helpers."""
