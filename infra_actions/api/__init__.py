"""API layer: Lambda entry points and their handlers."""
