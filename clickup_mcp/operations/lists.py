"""List operations (API v2)."""

from typing import Any

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import ListCreate, ListsEnvelope


async def get_lists(gateway: ClickUpGateway, folder_id: str) -> list[dict[str, Any]]:
    data = await gateway.request(f"/folder/{folder_id}/list")
    return ListsEnvelope.model_validate(data).lists


async def create_list(gateway: ClickUpGateway, folder_id: str, params: ListCreate) -> Any:
    return await gateway.request(f"/folder/{folder_id}/list", "POST", params.to_body())
