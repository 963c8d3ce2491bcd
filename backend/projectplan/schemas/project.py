# backend/projectplan/schemas/project.py
from typing import List, Optional
from pydantic import Field
from .base import BaseSchema, TimestampMixin
from .todo import Todo

class ProjectBase(BaseSchema):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""

class ProjectCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None

class ProjectUpdate(BaseSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None

class Project(ProjectBase, TimestampMixin):
    id: str

class ProjectDetail(BaseSchema):
    project: Project
    todos: List[Todo] = []
