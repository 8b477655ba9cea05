"""Infrastructure layer - logging, dependency injection and registries."""
