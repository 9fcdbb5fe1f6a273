"""Task operations (API v2)."""

from typing import Any

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import TaskCreate, TaskQuery, TasksEnvelope, TaskUpdate


async def get_tasks(gateway: ClickUpGateway, list_id: str) -> list[dict[str, Any]]:
    data = await gateway.request(f"/list/{list_id}/task")
    return TasksEnvelope.model_validate(data).tasks


async def get_task(gateway: ClickUpGateway, task_id: str) -> Any:
    return await gateway.request(f"/task/{task_id}")


async def create_task(gateway: ClickUpGateway, list_id: str, params: TaskCreate) -> Any:
    return await gateway.request(f"/list/{list_id}/task", "POST", params.to_body())


def _update_path(task_id: str, query: TaskQuery | None) -> str:
    path = f"/task/{task_id}"
    if query and query.custom_task_ids:
        path += "?custom_task_ids=true"
        # ClickUp wants team_id alongside custom ids; without it we still send
        # the request and let the API reject it.
        if query.team_id is not None:
            path += f"&team_id={query.team_id}"
    return path


async def update_task(
    gateway: ClickUpGateway,
    task_id: str,
    params: TaskUpdate,
    query: TaskQuery | None = None,
) -> Any:
    return await gateway.request(_update_path(task_id, query), "PUT", params.to_body())


async def delete_task(gateway: ClickUpGateway, task_id: str) -> None:
    await gateway.request(f"/task/{task_id}", "DELETE")
