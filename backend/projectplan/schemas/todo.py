# backend/projectplan/schemas/todo.py
import enum
from typing import Optional
from pydantic import Field
from .base import BaseSchema, TimestampMixin


class TodoStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TodoProgress(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TodoBase(BaseSchema):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    status: TodoStatus
    progress: TodoProgress


class TodoCreate(BaseSchema):
    project_id: str = Field(alias="projectId", min_length=1)
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    status: TodoStatus
    progress: TodoProgress


class TodoUpdate(BaseSchema):
    # Presence in the request, not truthiness, decides what gets applied
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    status: Optional[TodoStatus] = None
    progress: Optional[TodoProgress] = None


class Todo(TodoBase, TimestampMixin):
    id: str
    project_id: str = Field(alias="projectId")
