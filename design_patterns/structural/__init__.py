"""Structural pattern demos: Decorator."""
