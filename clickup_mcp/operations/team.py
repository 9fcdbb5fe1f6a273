"""Workspace (team) operations."""

from typing import Any

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import TeamsEnvelope


async def get_teams(gateway: ClickUpGateway) -> list[dict[str, Any]]:
    data = await gateway.request("/team")
    return TeamsEnvelope.model_validate(data).teams
