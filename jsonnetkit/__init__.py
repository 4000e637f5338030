"""Jsonnet value semantics, array and object builtins, manifesters and source-location utilities."""

__version__ = "0.1.0"

__all__ = ["location", "fodder", "values", "arrays", "manifest"]