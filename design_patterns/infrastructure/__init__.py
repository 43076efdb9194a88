"""Infrastructure layer - logging and pattern primitives."""
