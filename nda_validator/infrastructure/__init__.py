"""Adapters for files, schema sources and console logging."""

from .container import DependencyContainer

__all__ = ["DependencyContainer"]
