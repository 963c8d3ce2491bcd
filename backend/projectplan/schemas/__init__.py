# backend/projectplan/schemas/__init__.py
from .todo import Todo, TodoCreate, TodoUpdate, TodoStatus, TodoProgress
from .project import Project, ProjectCreate, ProjectUpdate, ProjectDetail
from .tool import ToolResult, ToolContent, ToolInfo

__all__ = [
    "Project", "ProjectCreate", "ProjectUpdate", "ProjectDetail",
    "Todo", "TodoCreate", "TodoUpdate", "TodoStatus", "TodoProgress",
    "ToolResult", "ToolContent", "ToolInfo"
]
