"""Workspace audit logs (API v3, Enterprise plans only)."""

from typing import Any

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import AuditLogQuery


async def create_audit_log(gateway: ClickUpGateway, workspace_id: str, params: AuditLogQuery) -> Any:
    return await gateway.request(f"/workspaces/{workspace_id}/auditlogs", "POST", params.to_body(), api_version="v3")
