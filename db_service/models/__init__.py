# db_service/models/__init__.py
"""
Import every model so that ``Base.metadata`` knows about all tables.
"""

from db_service.models.todo import TodoItem

__all__ = ["TodoItem"]
