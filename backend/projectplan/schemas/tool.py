# backend/projectplan/schemas/tool.py
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from .todo import TodoStatus, TodoProgress


class ToolContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: List[ToolContent]
    is_error: bool = Field(default=False, alias="isError")


class ToolInfo(BaseModel):
    name: str
    description: str
    input_schema: dict = Field(alias="inputSchema")

    model_config = ConfigDict(populate_by_name=True)


# Argument shapes, one per tool. Names match the wire arguments callers send.

class ToolArgs(BaseModel):
    pass


class NoArgs(ToolArgs):
    pass


class CreateProjectArgs(ToolArgs):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None


class ProjectIdArgs(ToolArgs):
    project_id: str


class UpdateProjectArgs(ToolArgs):
    project_id: str
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None


class ListTodosArgs(ToolArgs):
    projectId: str


class CreateTodoArgs(ToolArgs):
    projectId: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    status: TodoStatus
    progress: TodoProgress


class TodoIdArgs(ToolArgs):
    todo_id: str


class UpdateTodoArgs(ToolArgs):
    todo_id: str
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    status: Optional[TodoStatus] = None
    progress: Optional[TodoProgress] = None


class ListAllTodosArgs(ToolArgs):
    project_id: str
    status: Optional[Literal["pending", "in-progress", "completed", "all"]] = None
