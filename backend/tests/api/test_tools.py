# backend/tests/api/test_tools.py
import json
from fastapi import status

def test_list_tools(client):
    response = client.get("/api/tools")

    assert response.status_code == status.HTTP_200_OK
    tools = {tool["name"]: tool for tool in response.json()}
    assert "create_Todo" in tools
    assert "inputSchema" in tools["create_Todo"]

def test_call_tool(client):
    response = client.post("/api/tools/createProject", json={"name": "Launch"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["isError"] is False
    assert data["content"][0]["type"] == "text"
    assert json.loads(data["content"][0]["text"])["name"] == "Launch"

def test_call_tool_not_found_result(client):
    response = client.post("/api/tools/delete_Projects", json={"project_id": "missing"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["isError"] is True
    assert data["content"][0]["text"] == "Project missing not found"

def test_unknown_tool(client):
    response = client.post("/api/tools/nope", json={})
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_invalid_tool_arguments(client):
    response = client.post("/api/tools/createProject", json={"name": ""})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

def test_launch_scenario_over_tools(client):
    project = json.loads(client.post("/api/tools/createProject", json={"name": "Launch"}).json()["content"][0]["text"])
    todo_ids = []
    for name, todo_status in [("Write copy", "pending"), ("Book venue", "completed")]:
        result = client.post("/api/tools/create_Todo", json={
            "projectId": project["id"],
            "name": name,
            "status": todo_status,
            "progress": "medium"
        }).json()
        todo_ids.append(json.loads(result["content"][0]["text"])["id"])

    completed = client.post("/api/tools/list_all_todos", json={"project_id": project["id"], "status": "completed"}).json()
    assert [t["name"] for t in json.loads(completed["content"][0]["text"])] == ["Book venue"]

    client.post("/api/tools/delete_Projects", json={"project_id": project["id"]})

    for todo_id in todo_ids:
        assert client.post("/api/tools/get_Todo", json={"todo_id": todo_id}).json()["isError"] is True
    assert client.post("/api/tools/get_Projects", json={"project_id": project["id"]}).json()["isError"] is True
