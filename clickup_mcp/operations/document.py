"""Docs and pages (API v3, workspace scoped)."""

from typing import Any
from urllib.parse import quote

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import DocsEnvelope, DocumentCreate, PageCreate, PageEdit


def _docs_path(workspace_id: str, doc_id: str | None = None) -> str:
    path = f"/workspaces/{workspace_id}/docs"
    return f"{path}/{doc_id}" if doc_id else path


async def search_docs(gateway: ClickUpGateway, workspace_id: str, query: str | None = None) -> list[dict[str, Any]]:
    path = _docs_path(workspace_id)
    if query:
        path += f"?search={quote(query, safe='')}"
    data = await gateway.request(path, api_version="v3")
    return DocsEnvelope.model_validate(data).docs


async def create_document(gateway: ClickUpGateway, workspace_id: str, params: DocumentCreate) -> Any:
    return await gateway.request(_docs_path(workspace_id), "POST", params.to_body(), api_version="v3")


async def get_document(gateway: ClickUpGateway, workspace_id: str, doc_id: str) -> Any:
    return await gateway.request(_docs_path(workspace_id, doc_id), api_version="v3")


async def get_doc_pages(gateway: ClickUpGateway, workspace_id: str, doc_id: str) -> Any:
    return await gateway.request(f"{_docs_path(workspace_id, doc_id)}/pages", api_version="v3")


async def create_page(gateway: ClickUpGateway, workspace_id: str, doc_id: str, params: PageCreate) -> Any:
    return await gateway.request(
        f"{_docs_path(workspace_id, doc_id)}/pages",
        "POST",
        params.to_body(),
        api_version="v3",
    )


async def get_page(gateway: ClickUpGateway, workspace_id: str, doc_id: str, page_id: str) -> Any:
    return await gateway.request(f"{_docs_path(workspace_id, doc_id)}/pages/{page_id}", api_version="v3")


async def edit_page(gateway: ClickUpGateway, workspace_id: str, doc_id: str, page_id: str, params: PageEdit) -> Any:
    return await gateway.request(
        f"{_docs_path(workspace_id, doc_id)}/pages/{page_id}",
        "PUT",
        params.to_body(),
        api_version="v3",
    )
