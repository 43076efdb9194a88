"""Design pattern behavior tests package.

This package contains tests that validate each pattern demo: Builder,
Factory, Prototype, Singleton and Decorator.
"""
