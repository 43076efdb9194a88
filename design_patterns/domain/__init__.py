"""Domain layer - base models and exceptions shared by the pattern demos."""
