# backend/projectplan/services/tools.py
import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from .catalog import CatalogStore, NotFoundError
from ..schemas.project import ProjectCreate, ProjectUpdate
from ..schemas.todo import TodoCreate, TodoUpdate
from ..schemas.tool import (
    ToolArgs, NoArgs, CreateProjectArgs, ProjectIdArgs, UpdateProjectArgs,
    ListTodosArgs, CreateTodoArgs, TodoIdArgs, UpdateTodoArgs, ListAllTodosArgs,
    ToolContent, ToolInfo, ToolResult,
)
from ..utils.logging import service_logger


class UnknownToolError(LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


def render(value: Any) -> str:
    """Render models (or lists/dicts of them) as indented JSON text"""
    def _plain(obj):
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json", by_alias=True)
        if isinstance(obj, (list, tuple)):
            return [_plain(item) for item in obj]
        if isinstance(obj, dict):
            return {key: _plain(item) for key, item in obj.items()}
        return obj
    return json.dumps(_plain(value), indent=2)


@dataclass
class Tool:
    name: str
    description: str
    args_model: Type[ToolArgs]
    handler: Callable[[CatalogStore, Any], str]

    def info(self) -> ToolInfo:
        return ToolInfo(name=self.name, description=self.description, input_schema=self.args_model.model_json_schema())


def _create_project(catalog: CatalogStore, args: CreateProjectArgs) -> str:
    project = catalog.create_project(ProjectCreate(name=args.name, description=args.description))
    return render(project)


def _list_projects(catalog: CatalogStore, args: NoArgs) -> str:
    return render(catalog.list_projects())


def _get_project(catalog: CatalogStore, args: ProjectIdArgs) -> str:
    project, todos = catalog.get_project(args.project_id)
    return render({"project": project, "todos": todos})


def _update_project(catalog: CatalogStore, args: UpdateProjectArgs) -> str:
    update = ProjectUpdate(**args.model_dump(exclude={"project_id"}, exclude_unset=True))
    return render(catalog.update_project(args.project_id, update))


def _delete_project(catalog: CatalogStore, args: ProjectIdArgs) -> str:
    catalog.delete_project(args.project_id)
    return f"Project {args.project_id} deleted successfully."


def _list_todos(catalog: CatalogStore, args: ListTodosArgs) -> str:
    return render(catalog.get_todos_by_project_id(args.projectId))


def _create_todo(catalog: CatalogStore, args: CreateTodoArgs) -> str:
    todo = catalog.create_todo(TodoCreate(
        project_id=args.projectId,
        name=args.name,
        description=args.description,
        status=args.status,
        progress=args.progress,
    ))
    return render(todo)


def _update_todo(catalog: CatalogStore, args: UpdateTodoArgs) -> str:
    update = TodoUpdate(**args.model_dump(exclude={"todo_id"}, exclude_unset=True))
    return render(catalog.update_todo(args.todo_id, update))


def _delete_todo(catalog: CatalogStore, args: TodoIdArgs) -> str:
    catalog.delete_todo(args.todo_id)
    return f"Todo {args.todo_id} deleted successfully."


def _get_todo(catalog: CatalogStore, args: TodoIdArgs) -> str:
    return render(catalog.get_todo(args.todo_id))


def _list_all_todos(catalog: CatalogStore, args: ListAllTodosArgs) -> str:
    return render(catalog.list_all_todos(args.project_id, args.status))


TOOLS: Dict[str, Tool] = {tool.name: tool for tool in [
    Tool("createProject", "Create a new project", CreateProjectArgs, _create_project),
    Tool("listProjects", "List all projects", NoArgs, _list_projects),
    Tool("get_Projects", "get project by Id", ProjectIdArgs, _get_project),
    Tool("update_Project", "update project by Id", UpdateProjectArgs, _update_project),
    Tool("delete_Projects", "Delete project by its all todo", ProjectIdArgs, _delete_project),
    Tool("listTodos", "List all todos for a project", ListTodosArgs, _list_todos),
    Tool("create_Todo", "create a new Todo Project", CreateTodoArgs, _create_todo),
    Tool("update_Todo", "update Todo by Id", UpdateTodoArgs, _update_todo),
    Tool("delete_Todo", "Delete Todo by Id", TodoIdArgs, _delete_todo),
    Tool("get_Todo", "get Todo by Id", TodoIdArgs, _get_todo),
    Tool("list_all_todos", "list all todos by project Id", ListAllTodosArgs, _list_all_todos),
]}


class ToolService:
    """Dispatches named tool calls onto the catalog and wraps results as text content"""

    def __init__(self, tools: Dict[str, Tool] = TOOLS):
        self.tools = tools

    def list_tools(self) -> List[ToolInfo]:
        return [tool.info() for tool in self.tools.values()]

    async def call(self, name: str, arguments: Dict[str, Any], db: Session) -> ToolResult:
        tool = self.tools.get(name)
        if tool is None:
            service_logger.warning("Unknown tool requested", extra={"tool": name})
            raise UnknownToolError(name)

        # Raises pydantic.ValidationError before the catalog is touched
        args = tool.args_model.model_validate(arguments or {})

        start_time = time.time()
        service_logger.info("Calling tool", extra={"tool": name})
        try:
            text = tool.handler(CatalogStore(db), args)
        except NotFoundError as e:
            service_logger.warning("Tool call failed", extra={"tool": name, "error": str(e)})
            return ToolResult(content=[ToolContent(text=str(e))], is_error=True)
        except Exception as e:
            service_logger.error("Tool call raised", extra={"tool": name, "error": str(e)})
            raise

        service_logger.info("Tool call finished", extra={
            "tool": name,
            "execution_time_ms": round((time.time() - start_time) * 1000, 2)
        })
        return ToolResult(content=[ToolContent(text=text)])


tool_service = ToolService()
