# backend/projectplan/api/__init__.py
from .projects import router as projects_router
from .todos import router as todos_router
from .tools import router as tools_router

__all__ = ["projects_router", "todos_router", "tools_router"]
