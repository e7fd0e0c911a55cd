"""Domain layer: game objects and error types."""
