"""Todo service: CRUD over a single collection of todo items."""

__version__ = "1.0.0"
