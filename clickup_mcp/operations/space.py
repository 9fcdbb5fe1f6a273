"""Space operations (API v2)."""

from typing import Any

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import SpaceCreate, SpaceUpdate, SpacesEnvelope


async def get_spaces(gateway: ClickUpGateway, team_id: str) -> list[dict[str, Any]]:
    data = await gateway.request(f"/team/{team_id}/space")
    return SpacesEnvelope.model_validate(data).spaces


async def create_space(gateway: ClickUpGateway, team_id: str, params: SpaceCreate) -> Any:
    return await gateway.request(f"/team/{team_id}/space", "POST", params.to_body())


async def get_space(gateway: ClickUpGateway, space_id: str) -> Any:
    return await gateway.request(f"/space/{space_id}")


async def update_space(gateway: ClickUpGateway, space_id: str, params: SpaceUpdate) -> Any:
    return await gateway.request(f"/space/{space_id}", "PUT", params.to_body())


async def delete_space(gateway: ClickUpGateway, space_id: str) -> None:
    await gateway.request(f"/space/{space_id}", "DELETE")
