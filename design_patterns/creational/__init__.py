"""Creational pattern demos: Builder, Factory, Prototype and Singleton."""
