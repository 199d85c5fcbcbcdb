"""Infrastructure layer: provider clients and infrastructure errors."""
