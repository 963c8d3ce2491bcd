# backend/projectplan/api/tools.py
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError
from sqlalchemy.orm import Session
from ..database import get_db
from ..schemas.tool import ToolInfo, ToolResult
from ..services.tools import tool_service, UnknownToolError
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/tools", tags=["tools"])


@router.get("", response_model=List[ToolInfo])
async def list_tools():
    """Names, descriptions and argument schemas of the callable tools"""
    return tool_service.list_tools()


@router.post("/{tool_name}", response_model=ToolResult)
async def call_tool(
    tool_name: str,
    arguments: Dict[str, Any] = Body(default={}),
    db: Session = Depends(get_db)
):
    api_logger.info("Tool invocation", extra={"tool": tool_name, "argument_names": sorted(arguments)})

    try:
        result = await tool_service.call(tool_name, arguments, db)
        api_logger.info("Tool invocation complete", extra={"tool": tool_name, "is_error": result.is_error})
        return result
    except UnknownToolError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        api_logger.warning("Invalid tool arguments", extra={"tool": tool_name, "error_count": e.error_count()})
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    except Exception as e:
        api_logger.error("Tool invocation failed", extra={"tool": tool_name, "error": str(e)})
        raise
