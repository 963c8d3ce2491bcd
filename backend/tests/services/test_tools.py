# tests/services/test_tools.py
import json
import pytest
from pydantic import ValidationError
from projectplan.services.tools import tool_service, UnknownToolError


@pytest.mark.asyncio
async def test_create_project_tool_returns_json_text(db_session):
    result = await tool_service.call("createProject", {"name": "Launch"}, db_session)

    assert result.is_error is False
    project = json.loads(result.content[0].text)
    assert project["name"] == "Launch"
    assert project["description"] == ""
    assert {"id", "createAt", "updateAt"} <= set(project)


@pytest.mark.asyncio
async def test_get_project_tool_includes_todos(db_session, sample_project, sample_todo):
    result = await tool_service.call("get_Projects", {"project_id": sample_project.id}, db_session)

    payload = json.loads(result.content[0].text)
    assert payload["project"]["id"] == sample_project.id
    assert [t["id"] for t in payload["todos"]] == [sample_todo.id]


@pytest.mark.asyncio
async def test_missing_entity_is_an_error_result(db_session):
    result = await tool_service.call("get_Todo", {"todo_id": "missing"}, db_session)

    assert result.is_error is True
    assert result.content[0].text == "Todo missing not found"


@pytest.mark.asyncio
async def test_update_todo_tool_applies_only_supplied_fields(db_session, sample_todo):
    result = await tool_service.call(
        "update_Todo",
        {"todo_id": sample_todo.id, "status": "completed"},
        db_session
    )

    todo = json.loads(result.content[0].text)
    assert todo["status"] == "completed"
    assert todo["name"] == sample_todo.name
    assert todo["progress"] == "low"


@pytest.mark.asyncio
async def test_delete_tools_return_confirmation(db_session, sample_project, sample_todo):
    todo_result = await tool_service.call("delete_Todo", {"todo_id": sample_todo.id}, db_session)
    project_result = await tool_service.call("delete_Projects", {"project_id": sample_project.id}, db_session)

    assert todo_result.content[0].text == f"Todo {sample_todo.id} deleted successfully."
    assert project_result.content[0].text == f"Project {sample_project.id} deleted successfully."


@pytest.mark.asyncio
async def test_list_all_todos_tool_filters(db_session, sample_project, sample_todo):
    await tool_service.call("create_Todo", {
        "projectId": sample_project.id,
        "name": "Done already",
        "status": "completed",
        "progress": "high"
    }, db_session)

    result = await tool_service.call(
        "list_all_todos",
        {"project_id": sample_project.id, "status": "completed"},
        db_session
    )

    todos = json.loads(result.content[0].text)
    assert [t["name"] for t in todos] == ["Done already"]


@pytest.mark.asyncio
async def test_unknown_tool(db_session):
    with pytest.raises(UnknownToolError):
        await tool_service.call("dropEverything", {}, db_session)


@pytest.mark.asyncio
async def test_invalid_arguments_are_rejected(db_session):
    with pytest.raises(ValidationError):
        await tool_service.call("create_Todo", {"projectId": "p", "name": "x", "status": "done", "progress": "low"}, db_session)


def test_list_tools_names():
    names = [tool.name for tool in tool_service.list_tools()]

    assert names == [
        "createProject", "listProjects", "get_Projects", "update_Project", "delete_Projects",
        "listTodos", "create_Todo", "update_Todo", "delete_Todo", "get_Todo", "list_all_todos"
    ]
