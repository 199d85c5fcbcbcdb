"""Domain layer: event models, job states and validation errors."""
