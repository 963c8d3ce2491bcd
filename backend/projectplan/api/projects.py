# backend/projectplan/api/projects.py
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from ..database import get_db
from ..schemas.project import ProjectCreate, ProjectUpdate, Project as ProjectSchema, ProjectDetail
from ..schemas.todo import Todo as TodoSchema
from ..services.catalog import CatalogStore, NotFoundError
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/projects", tags=["projects"])

@router.get("", response_model=List[ProjectSchema])
async def list_projects(db: Session = Depends(get_db)):
    """List all projects"""
    api_logger.info("Starting projects list operation", extra={
        "endpoint": "/api/projects",
        "method": "GET"
    })

    try:
        projects = CatalogStore(db).list_projects()
        api_logger.info(f"Found {len(projects)} projects")
        return projects
    except Exception as e:
        api_logger.error("Failed to list projects", extra={"error": str(e)})
        raise

@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project_id: str, db: Session = Depends(get_db)):
    api_logger.info("Fetching project", extra={"project_id": project_id})

    try:
        project, todos = CatalogStore(db).get_project(project_id)

        api_logger.info("Project retrieved successfully", extra={
            "project_id": project_id,
            "todo_count": len(todos)
        })
        return ProjectDetail(project=project, todos=todos)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        api_logger.error("Failed to get project", extra={
            "project_id": project_id,
            "error": str(e)
        })
        raise

@router.get("/{project_id}/todos", response_model=List[TodoSchema])
async def list_project_todos(
    project_id: str,
    status: Optional[Literal["pending", "in-progress", "completed", "all"]] = None,
    db: Session = Depends(get_db)
):
    """List a project's todos, optionally filtered by status"""
    api_logger.info("Listing project todos", extra={"project_id": project_id, "status_filter": status})

    try:
        todos = CatalogStore(db).list_all_todos(project_id, status)
        api_logger.info("Listed project todos", extra={"project_id": project_id, "todo_count": len(todos)})
        return todos
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        api_logger.error("Failed to list project todos", extra={
            "project_id": project_id,
            "error": str(e)
        })
        raise

@router.post("", response_model=ProjectSchema)
async def create_project(project: ProjectCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new project", extra={"project_name": project.name})

    try:
        created = CatalogStore(db).create_project(project)

        api_logger.info("Project created successfully", extra={
            "project_id": created.id,
            "project_name": created.name
        })
        return created
    except Exception as e:
        api_logger.error("Failed to create project", extra={
            "project_name": project.name,
            "error": str(e)
        })
        raise

@router.patch("/{project_id}", response_model=ProjectSchema)
async def update_project(project_id: str, project: ProjectUpdate, db: Session = Depends(get_db)):
    api_logger.info("Updating project", extra={"project_id": project_id})

    try:
        updated = CatalogStore(db).update_project(project_id, project)

        api_logger.info("Project updated successfully", extra={"project_id": project_id})
        return updated
    except NotFoundError as e:
        api_logger.warning("Project not found for update", extra={"project_id": project_id})
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        api_logger.error("Failed to update project", extra={
            "project_id": project_id,
            "error": str(e)
        })
        raise

@router.delete("/{project_id}")
async def delete_project(project_id: str, db: Session = Depends(get_db)):
    api_logger.info("Deleting project", extra={"project_id": project_id})

    try:
        # Removes the project's todos, its todo index and its projectList entry
        CatalogStore(db).delete_project(project_id)

        api_logger.info(f"Successfully deleted project {project_id}")
        return {"success": True, "message": f"Project {project_id} deleted successfully."}
    except NotFoundError as e:
        api_logger.warning("Project not found for deletion", extra={"project_id": project_id})
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        api_logger.error(f"Failed to delete project: {str(e)}")
        raise
