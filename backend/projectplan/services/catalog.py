# backend/projectplan/services/catalog.py
"""Projects and their todos stored as independent key-value records.

Each entity has a primary record, and membership is kept in list records
that are rewritten wholesale on every change:

    <project id>                     Project record
    projectList                      ids of all live projects
    todo:<todo id>                   Todo record
    project:<project id>:todoList    ids of the project's live todos

The backend offers no multi-key transactions, so operations that touch
several keys are ordered but not atomic, and concurrent writers to the same
project can lose index updates. Callers are expected to serialise mutations
per project.
"""
import uuid
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from .kv_store import KeyValueStore
from ..config import settings
from ..schemas.project import Project, ProjectCreate, ProjectUpdate
from ..schemas.todo import Todo, TodoCreate, TodoUpdate
from ..utils.logging import service_logger
from ..utils import timestamps

PROJECT_LIST_KEY = "projectList"
STATUS_ALL = "all"


def project_key(project_id: str) -> str:
    return project_id


def todo_key(todo_id: str) -> str:
    return f"todo:{todo_id}"


def todo_list_key(project_id: str) -> str:
    return f"project:{project_id}:todoList"


def is_reserved_key(key: str) -> bool:
    """Project ids share the namespace with index and todo keys"""
    return key == PROJECT_LIST_KEY or key.startswith(("todo:", "project:"))


class NotFoundError(Exception):
    """A referenced project or todo has no primary record"""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id} not found")


class CatalogStore:
    def __init__(self, db: Session, enforce_project_on_todo_create: Optional[bool] = None):
        self.kv = KeyValueStore(db)
        if enforce_project_on_todo_create is None:
            enforce_project_on_todo_create = settings.ENFORCE_PROJECT_ON_TODO_CREATE
        self.enforce_project_on_todo_create = enforce_project_on_todo_create

    # ------------------------------------------------------------------
    # Record helpers
    # ------------------------------------------------------------------

    def _load_project(self, project_id: str) -> Project:
        payload = None
        if not is_reserved_key(project_id):
            payload = self.kv.read_record(project_key(project_id))
        if payload is None:
            service_logger.warning("Project not found", extra={"project_id": project_id})
            raise NotFoundError("Project", project_id)
        return Project.model_validate(payload)

    def _load_todo(self, todo_id: str) -> Todo:
        payload = self.kv.read_record(todo_key(todo_id))
        if payload is None:
            service_logger.warning("Todo not found", extra={"todo_id": todo_id})
            raise NotFoundError("Todo", todo_id)
        return Todo.model_validate(payload)

    def _save_project(self, project: Project) -> None:
        self.kv.write_record(project_key(project.id), project.model_dump(mode="json", by_alias=True))

    def _save_todo(self, todo: Todo) -> None:
        self.kv.write_record(todo_key(todo.id), todo.model_dump(mode="json", by_alias=True))

    def _append_to_list(self, key: str, entity_id: str) -> None:
        ids = self.kv.read_list(key)
        ids.append(entity_id)
        self.kv.write_list(key, ids)

    def _remove_from_list(self, key: str, entity_id: str) -> None:
        ids = self.kv.read_list(key)
        self.kv.write_list(key, [i for i in ids if i != entity_id])

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def create_project(self, data: ProjectCreate) -> Project:
        now = timestamps.utc_now()
        project = Project(
            id=str(uuid.uuid4()),
            name=data.name,
            description=data.description or "",
            created_at=now,
            updated_at=now,
        )
        self._save_project(project)
        self._append_to_list(PROJECT_LIST_KEY, project.id)

        service_logger.info("Project created", extra={"project_id": project.id, "project_name": project.name})
        return project

    def list_projects(self) -> List[Project]:
        projects = []
        for project_id in self.kv.read_list(PROJECT_LIST_KEY):
            payload = self.kv.read_record(project_key(project_id))
            if payload is None:
                service_logger.warning("Skipping dangling project index entry", extra={"project_id": project_id})
                continue
            projects.append(Project.model_validate(payload))
        return projects

    def get_project(self, project_id: str) -> Tuple[Project, List[Todo]]:
        project = self._load_project(project_id)
        todos = self.get_todos_by_project_id(project_id)
        return project, todos

    def update_project(self, project_id: str, data: ProjectUpdate) -> Project:
        project = self._load_project(project_id)

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        project = project.model_copy(update={**changes, "updated_at": timestamps.utc_now()})
        self._save_project(project)

        service_logger.info("Project updated", extra={"project_id": project_id, "fields": sorted(changes)})
        return project

    def delete_project(self, project_id: str) -> None:
        self._load_project(project_id)
        todos = self.get_todos_by_project_id(project_id)

        # Children first, the global index last: an interrupted delete leaves
        # a stale projectList entry rather than todos with no visible owner.
        for todo in todos:
            self.kv.delete_record(todo_key(todo.id))
        self.kv.delete_record(todo_list_key(project_id))
        self.kv.delete_record(project_key(project_id))
        self._remove_from_list(PROJECT_LIST_KEY, project_id)

        service_logger.info("Project deleted", extra={"project_id": project_id, "todo_count": len(todos)})

    # ------------------------------------------------------------------
    # Todos
    # ------------------------------------------------------------------

    def get_todos_by_project_id(self, project_id: str) -> List[Todo]:
        todos = []
        for todo_id in self.kv.read_list(todo_list_key(project_id)):
            payload = self.kv.read_record(todo_key(todo_id))
            if payload is None:
                service_logger.warning("Skipping dangling todo index entry", extra={
                    "project_id": project_id,
                    "todo_id": todo_id
                })
                continue
            todos.append(Todo.model_validate(payload))
        return todos

    list_todos_for_project = get_todos_by_project_id

    def create_todo(self, data: TodoCreate) -> Todo:
        if self.enforce_project_on_todo_create:
            self._load_project(data.project_id)

        now = timestamps.utc_now()
        todo = Todo(
            id=str(uuid.uuid4()),
            project_id=data.project_id,
            name=data.name,
            description=data.description or "",
            status=data.status,
            progress=data.progress,
            created_at=now,
            updated_at=now,
        )
        self._save_todo(todo)
        self._append_to_list(todo_list_key(todo.project_id), todo.id)

        service_logger.info("Todo created", extra={"todo_id": todo.id, "project_id": todo.project_id})
        return todo

    def get_todo(self, todo_id: str) -> Todo:
        return self._load_todo(todo_id)

    def update_todo(self, todo_id: str, data: TodoUpdate) -> Todo:
        todo = self._load_todo(todo_id)

        # An explicit "" is applied; an omitted or null field is not
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        todo = todo.model_copy(update={**changes, "updated_at": timestamps.utc_now()})
        self._save_todo(todo)

        service_logger.info("Todo updated", extra={"todo_id": todo_id, "fields": sorted(changes)})
        return todo

    def delete_todo(self, todo_id: str) -> None:
        todo = self._load_todo(todo_id)

        self.kv.delete_record(todo_key(todo_id))
        self._remove_from_list(todo_list_key(todo.project_id), todo_id)

        service_logger.info("Todo deleted", extra={"todo_id": todo_id, "project_id": todo.project_id})

    def list_all_todos(self, project_id: str, status: Optional[str] = None) -> List[Todo]:
        self._load_project(project_id)
        todos = self.get_todos_by_project_id(project_id)

        if status and status != STATUS_ALL:
            todos = [todo for todo in todos if todo.status == status]
        return todos
