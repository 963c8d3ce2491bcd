# backend/projectplan/api/todos.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from ..database import get_db
from ..schemas.todo import TodoCreate, TodoUpdate, Todo as TodoSchema
from ..services.catalog import CatalogStore, NotFoundError
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("/project/{project_id}", response_model=List[TodoSchema])
async def list_todos_for_project(project_id: str, db: Session = Depends(get_db)):
    """Todos listed in the project's index; an unknown project yields an empty list"""
    api_logger.info("Listing todos for project", extra={
        "project_id": project_id,
        "operation": "list_todos_for_project"
    })

    try:
        todos = CatalogStore(db).get_todos_by_project_id(project_id)
        api_logger.info("Successfully listed project todos", extra={
            "project_id": project_id,
            "todo_count": len(todos)
        })
        return todos
    except Exception as e:
        api_logger.error("Error listing project todos", extra={
            "project_id": project_id,
            "error": str(e)
        })
        raise


@router.post("", response_model=TodoSchema)
async def create_todo(todo: TodoCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new todo", extra={
        "project_id": todo.project_id,
        "todo_name": todo.name
    })

    try:
        created = CatalogStore(db).create_todo(todo)

        api_logger.info("Successfully created todo", extra={
            "todo_id": created.id,
            "project_id": created.project_id
        })
        return created
    except NotFoundError as e:
        api_logger.warning("Cannot create todo for missing project", extra={"project_id": todo.project_id})
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        api_logger.error("Error creating todo", extra={
            "project_id": todo.project_id,
            "error": str(e)
        })
        raise


@router.get("/{todo_id}", response_model=TodoSchema)
async def get_todo(todo_id: str, db: Session = Depends(get_db)):
    api_logger.info("Fetching todo", extra={"todo_id": todo_id})

    try:
        return CatalogStore(db).get_todo(todo_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{todo_id}", response_model=TodoSchema)
async def update_todo(todo_id: str, todo: TodoUpdate, db: Session = Depends(get_db)):
    api_logger.info("Updating todo", extra={
        "todo_id": todo_id,
        "fields": sorted(todo.model_fields_set)
    })

    try:
        updated = CatalogStore(db).update_todo(todo_id, todo)

        api_logger.info("Successfully updated todo", extra={"todo_id": todo_id})
        return updated
    except NotFoundError as e:
        api_logger.warning("Todo not found for update", extra={"todo_id": todo_id})
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        api_logger.error("Error updating todo", extra={
            "todo_id": todo_id,
            "error": str(e)
        })
        raise


@router.delete("/{todo_id}")
async def delete_todo(todo_id: str, db: Session = Depends(get_db)):
    api_logger.info("Deleting todo", extra={"todo_id": todo_id})

    try:
        CatalogStore(db).delete_todo(todo_id)

        api_logger.info("Successfully deleted todo", extra={"todo_id": todo_id})
        return {"success": True, "message": f"Todo {todo_id} deleted successfully."}
    except NotFoundError as e:
        api_logger.warning("Todo not found for deletion", extra={"todo_id": todo_id})
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        api_logger.error("Error deleting todo", extra={
            "todo_id": todo_id,
            "error": str(e)
        })
        raise
