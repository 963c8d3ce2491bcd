# backend/projectplan/services/__init__.py
from .catalog import CatalogStore, NotFoundError
from .tools import tool_service, UnknownToolError

__all__ = ["CatalogStore", "NotFoundError", "tool_service", "UnknownToolError"]
