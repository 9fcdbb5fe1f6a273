"""Folder operations (API v2)."""

from typing import Any

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import FolderCreate, FoldersEnvelope, FolderTemplateOptions, FolderUpdate


async def get_folders(gateway: ClickUpGateway, space_id: str, archived: bool | None = None) -> list[dict[str, Any]]:
    path = f"/space/{space_id}/folder"
    if archived is not None:
        path += f"?archived={'true' if archived else 'false'}"
    data = await gateway.request(path)
    return FoldersEnvelope.model_validate(data).folders


async def create_folder(gateway: ClickUpGateway, space_id: str, params: FolderCreate) -> Any:
    return await gateway.request(f"/space/{space_id}/folder", "POST", params.to_body())


async def create_folder_from_template(
    gateway: ClickUpGateway,
    space_id: str,
    template_id: str,
    options: FolderTemplateOptions,
) -> Any:
    return await gateway.request(
        f"/space/{space_id}/folder/template/{template_id}",
        "POST",
        options.to_body(),
    )


async def get_folder(gateway: ClickUpGateway, folder_id: str) -> Any:
    return await gateway.request(f"/folder/{folder_id}")


async def update_folder(gateway: ClickUpGateway, folder_id: str, params: FolderUpdate) -> Any:
    return await gateway.request(f"/folder/{folder_id}", "PUT", params.to_body())


async def delete_folder(gateway: ClickUpGateway, folder_id: str) -> None:
    await gateway.request(f"/folder/{folder_id}", "DELETE")
