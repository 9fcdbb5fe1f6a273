"""Tests for task operations."""

import json

import pytest
from pytest_httpx import HTTPXMock

from clickup_mcp.errors import ApiError
from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import AssigneeDelta, TaskCreate, TaskQuery, TaskUpdate
from clickup_mcp.operations import task
from clickup_mcp.settings import DEFAULT_BASE_URL_V2 as V2


def _last_request(httpx_mock: HTTPXMock):
    requests = httpx_mock.get_requests()
    assert requests
    return requests[-1]


class TestReadTasks:
    async def test_get_tasks_unwraps(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock, sample_task: dict) -> None:
        httpx_mock.add_response(url=f"{V2}/list/L1/task", json={"tasks": [sample_task], "last_page": True})
        assert await task.get_tasks(gateway, "L1") == [sample_task]

    async def test_get_task_returns_entity(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock, sample_task: dict) -> None:
        httpx_mock.add_response(url=f"{V2}/task/86abc", json=sample_task)
        assert await task.get_task(gateway, "86abc") == sample_task


class TestCreateTask:
    async def test_posts_to_list(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock, sample_task: dict) -> None:
        httpx_mock.add_response(url=f"{V2}/list/L1/task", method="POST", json=sample_task)
        params = TaskCreate(name="Write release notes", dueDate="next friday", tags=["docs"])

        created = await task.create_task(gateway, "L1", params)

        assert created["id"] == "86abc"
        body = json.loads(_last_request(httpx_mock).content)
        assert body == {"name": "Write release notes", "dueDate": "next friday", "tags": ["docs"]}
        assert "due_date" not in body


class TestUpdateTask:
    async def test_query_params_in_order(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(method="PUT", json={"id": "CU-12"})
        await task.update_task(
            gateway, "CU-12", TaskUpdate(name="x"), TaskQuery(custom_task_ids=True, team_id=123)
        )
        url = str(_last_request(httpx_mock).url)
        assert url == f"{V2}/task/CU-12?custom_task_ids=true&team_id=123"
        assert url.count("custom_task_ids") == 1

    async def test_custom_ids_without_team_still_sent(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(method="PUT", status_code=400, text='{"err":"Team id required"}')
        with pytest.raises(ApiError, match="Team id required"):
            await task.update_task(gateway, "CU-12", TaskUpdate(name="x"), TaskQuery(custom_task_ids=True))
        assert str(_last_request(httpx_mock).url) == f"{V2}/task/CU-12?custom_task_ids=true"

    async def test_team_id_alone_is_ignored(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{V2}/task/t1", method="PUT", json={"id": "t1"})
        await task.update_task(gateway, "t1", TaskUpdate(name="x"), TaskQuery(team_id=123))
        assert str(_last_request(httpx_mock).url) == f"{V2}/task/t1"

    async def test_due_date_sets_time_flag(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{V2}/task/t1", method="PUT", json={"id": "t1"})
        await task.update_task(gateway, "t1", TaskUpdate(due_date=1714550400000))
        body = json.loads(_last_request(httpx_mock).content)
        assert body == {"due_date": 1714550400000, "due_date_time": True}

    async def test_delta_sets_sent(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{V2}/task/t1", method="PUT", json={"id": "t1"})
        await task.update_task(gateway, "t1", TaskUpdate(assignees=AssigneeDelta(add=[183]), watchers=AssigneeDelta(rem=[7])))
        body = json.loads(_last_request(httpx_mock).content)
        assert body == {"assignees": {"add": [183]}, "watchers": {"rem": [7]}}

    async def test_empty_put_response_is_success(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{V2}/task/t1", method="PUT", status_code=200, text="")
        assert await task.update_task(gateway, "t1", TaskUpdate(status="done")) == {"success": True}


class TestDeleteTask:
    async def test_delete(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{V2}/task/t1", method="DELETE", status_code=204)
        assert await task.delete_task(gateway, "t1") is None

    async def test_delete_missing_raises(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{V2}/task/t404", method="DELETE", status_code=404, text="Task not found")
        with pytest.raises(ApiError) as excinfo:
            await task.delete_task(gateway, "t404")
        assert excinfo.value.status_code == 404
