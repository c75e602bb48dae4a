"""Kernel – errors, entity base classes, identifiers."""
