"""MCP command surface: tools, resources and prompts over the ClickUp operations."""

import functools
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations
from pydantic import Field

from clickup_mcp import batch
from clickup_mcp.batch import BatchRunner
from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import (
    Applicability,
    AssigneeDelta,
    AuditLogFilter,
    AuditLogPagination,
    AuditLogQuery,
    DocumentCreate,
    FolderCreate,
    FolderTemplateOptions,
    FolderUpdate,
    ListCreate,
    PageCreate,
    PageEdit,
    SpaceCreate,
    SpaceUpdate,
    TaskCreate,
    TaskQuery,
    TaskUpdate,
    TaskUpdateItem,
)
from clickup_mcp.operations import audit, document, folder, lists, space, task, team

logger = logging.getLogger(__name__)

SERVER_NAME = "ClickUp MCP Server"

READ_ONLY = ToolAnnotations(readOnlyHint=True, idempotentHint=True)
DESTRUCTIVE = ToolAnnotations(readOnlyHint=False, destructiveHint=True)

# Tool arguments use the camelCase names clients already send; ClickUp body
# fields stay snake_case.
TeamId = Annotated[str, Field(description="Workspace (team) ID")]
SpaceId = Annotated[str, Field(description="Space ID")]
FolderId = Annotated[str, Field(description="Folder ID")]
ListId = Annotated[str, Field(description="List ID")]
TaskId = Annotated[str, Field(description="Task ID")]
DocumentId = Annotated[str, Field(description="Document ID")]
PageId = Annotated[str, Field(description="Page ID")]

CommandFn = Callable[..., Awaitable[str]]


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _only_supplied(**fields: Any) -> dict[str, Any]:
    # TaskUpdate sends every field that is set, so omit what the caller left out.
    return {k: v for k, v in fields.items() if v is not None}


def _command(
    mcp: FastMCP,
    name: str,
    action: str,
    annotations: ToolAnnotations | None = None,
) -> Callable[[CommandFn], CommandFn]:
    """Register fn as tool `name`; any exception becomes an error-flagged result."""

    def decorator(fn: CommandFn) -> CommandFn:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> str:
            try:
                return await fn(*args, **kwargs)
            except Exception as exc:
                logger.error("Error %s: %s", action, exc)
                raise ToolError(f"Error {action}: {exc}") from exc

        mcp.tool(name=name, annotations=annotations)(wrapper)
        return fn

    return decorator


def build_server(gateway: ClickUpGateway, runner: BatchRunner | None = None) -> FastMCP:
    mcp = FastMCP(SERVER_NAME)
    _register_resources(mcp, gateway)
    _register_hierarchy_tools(mcp, gateway)
    _register_task_tools(mcp, gateway, runner)
    _register_document_tools(mcp, gateway)
    _register_prompts(mcp)
    return mcp


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


def _register_resources(mcp: FastMCP, gateway: ClickUpGateway) -> None:
    @mcp.resource("clickup://teams", name="teams", mime_type="application/json")
    async def teams_resource() -> str:
        return _dump(await team.get_teams(gateway))

    @mcp.resource("clickup://teams/{team_id}/spaces", name="spaces", mime_type="application/json")
    async def spaces_resource(team_id: str) -> str:
        return _dump(await space.get_spaces(gateway, team_id))

    @mcp.resource("clickup://spaces/{space_id}/folders", name="folders", mime_type="application/json")
    async def folders_resource(space_id: str) -> str:
        return _dump(await folder.get_folders(gateway, space_id))

    @mcp.resource("clickup://folders/{folder_id}/lists", name="lists", mime_type="application/json")
    async def lists_resource(folder_id: str) -> str:
        return _dump(await lists.get_lists(gateway, folder_id))

    @mcp.resource("clickup://lists/{list_id}/tasks", name="tasks", mime_type="application/json")
    async def tasks_resource(list_id: str) -> str:
        return _dump(await task.get_tasks(gateway, list_id))

    @mcp.resource("clickup://tasks/{task_id}", name="task", mime_type="application/json")
    async def task_resource(task_id: str) -> str:
        return _dump(await task.get_task(gateway, task_id))

    @mcp.resource("clickup://teams/{team_id}/docs/{document_id}", name="document", mime_type="application/json")
    async def document_resource(team_id: str, document_id: str) -> str:
        return _dump(await document.get_document(gateway, team_id, document_id))


# ---------------------------------------------------------------------------
# Teams, spaces, folders, lists
# ---------------------------------------------------------------------------


def _register_hierarchy_tools(mcp: FastMCP, gateway: ClickUpGateway) -> None:
    @_command(mcp, "get-teams", "getting teams", READ_ONLY)
    async def get_teams() -> str:
        """List the workspaces (teams) the API key can access."""
        return _dump(await team.get_teams(gateway))

    @_command(mcp, "create-space", "creating space")
    async def create_space(
        teamId: TeamId,
        name: str,
        multiple_assignees: bool | None = None,
        features: dict[str, Any] | None = None,
    ) -> str:
        """Create a space in a workspace."""
        params = SpaceCreate(name=name, multiple_assignees=multiple_assignees, features=features)
        return _dump(await space.create_space(gateway, teamId, params))

    @_command(mcp, "get-spaces", "getting spaces", READ_ONLY)
    async def get_spaces(teamId: TeamId) -> str:
        """List the spaces of a workspace."""
        return _dump(await space.get_spaces(gateway, teamId))

    @_command(mcp, "get-space", "getting space", READ_ONLY)
    async def get_space(spaceId: SpaceId) -> str:
        """Get one space."""
        return _dump(await space.get_space(gateway, spaceId))

    @_command(mcp, "update-space", "updating space")
    async def update_space(
        spaceId: SpaceId,
        name: str | None = None,
        color: str | None = None,
        private: bool | None = None,
        admin_can_manage: bool | None = None,
        multiple_assignees: bool | None = None,
        features: dict[str, Any] | None = None,
    ) -> str:
        """Rename, recolor or reconfigure a space."""
        params = SpaceUpdate(
            name=name,
            color=color,
            private=private,
            admin_can_manage=admin_can_manage,
            multiple_assignees=multiple_assignees,
            features=features,
        )
        return _dump(await space.update_space(gateway, spaceId, params))

    @_command(mcp, "delete-space", "deleting space", DESTRUCTIVE)
    async def delete_space(spaceId: SpaceId) -> str:
        """Delete a space and everything in it."""
        await space.delete_space(gateway, spaceId)
        return f"Space {spaceId} deleted successfully"

    @_command(mcp, "get-folders", "getting folders", READ_ONLY)
    async def get_folders(spaceId: SpaceId, archived: bool | None = None) -> str:
        """List the folders of a space, optionally filtered on archived."""
        return _dump(await folder.get_folders(gateway, spaceId, archived))

    @_command(mcp, "create-folder", "creating folder")
    async def create_folder(spaceId: SpaceId, name: str) -> str:
        """Create a folder in a space."""
        return _dump(await folder.create_folder(gateway, spaceId, FolderCreate(name=name)))

    @_command(mcp, "get-folder", "getting folder", READ_ONLY)
    async def get_folder(folderId: FolderId) -> str:
        """Get one folder."""
        return _dump(await folder.get_folder(gateway, folderId))

    @_command(mcp, "update-folder", "updating folder")
    async def update_folder(folderId: FolderId, name: str) -> str:
        """Rename a folder."""
        return _dump(await folder.update_folder(gateway, folderId, FolderUpdate(name=name)))

    @_command(mcp, "delete-folder", "deleting folder", DESTRUCTIVE)
    async def delete_folder(folderId: FolderId) -> str:
        """Delete a folder."""
        await folder.delete_folder(gateway, folderId)
        return f"Folder {folderId} deleted successfully"

    @_command(mcp, "create-folder-from-template", "creating folder from template")
    async def create_folder_from_template(
        spaceId: SpaceId,
        templateId: Annotated[str, Field(description="Folder template ID")],
        options: FolderTemplateOptions,
    ) -> str:
        """Create a folder in a space from a folder template."""
        return _dump(await folder.create_folder_from_template(gateway, spaceId, templateId, options))

    @_command(mcp, "get-lists", "getting lists", READ_ONLY)
    async def get_lists(folderId: FolderId) -> str:
        """List the lists of a folder."""
        return _dump(await lists.get_lists(gateway, folderId))

    @_command(mcp, "create-list", "creating list")
    async def create_list(
        folderId: FolderId,
        name: str,
        content: str | None = None,
        due_date: Annotated[int | None, Field(description="Due date, ms timestamp")] = None,
        due_date_time: bool | None = None,
        priority: Annotated[int | None, Field(ge=1, le=4)] = None,
        assignee: Annotated[int | None, Field(description="User ID")] = None,
        status: str | None = None,
        include_markdown_description: bool | None = None,
    ) -> str:
        """Create a list in a folder."""
        params = ListCreate(
            name=name,
            content=content,
            due_date=due_date,
            due_date_time=due_date_time,
            priority=priority,
            assignee=assignee,
            status=status,
            include_markdown_description=include_markdown_description,
        )
        return _dump(await lists.create_list(gateway, folderId, params))


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


def _register_task_tools(mcp: FastMCP, gateway: ClickUpGateway, runner: BatchRunner | None) -> None:
    @_command(mcp, "get-tasks", "getting tasks", READ_ONLY)
    async def get_tasks(listId: ListId) -> str:
        """List the tasks of a list."""
        return _dump(await task.get_tasks(gateway, listId))

    @_command(mcp, "get-task", "getting task", READ_ONLY)
    async def get_task(taskId: TaskId) -> str:
        """Get one task."""
        return _dump(await task.get_task(gateway, taskId))

    @_command(mcp, "create-task", "creating task")
    async def create_task(
        listId: ListId,
        name: str,
        description: str | None = None,
        priority: int | None = None,
        dueDate: str | None = None,
        assignees: list[str] | None = None,
        tags: list[str] | None = None,
    ) -> str:
        """Create a task in a list."""
        params = TaskCreate(
            name=name,
            description=description,
            priority=priority,
            dueDate=dueDate,
            assignees=assignees,
            tags=tags,
        )
        return _dump(await task.create_task(gateway, listId, params))

    @_command(mcp, "update-task", "updating task")
    async def update_task(
        taskId: TaskId,
        custom_item_id: int | None = None,
        name: str | None = None,
        description: Annotated[str | None, Field(description='Use " " to clear')] = None,
        markdown_content: Annotated[str | None, Field(description="Overrides description")] = None,
        status: str | None = None,
        priority: int | None = None,
        due_date: Annotated[int | None, Field(description="Due date, ms timestamp")] = None,
        due_date_time: bool | None = None,
        parent: Annotated[str | None, Field(description="Parent task ID")] = None,
        time_estimate: int | None = None,
        start_date: Annotated[int | None, Field(description="Start date, ms timestamp")] = None,
        start_date_time: bool | None = None,
        points: int | float | None = None,
        assignees: AssigneeDelta | None = None,
        group_assignees: AssigneeDelta | None = None,
        watchers: AssigneeDelta | None = None,
        archived: bool | None = None,
        custom_task_ids: Annotated[bool | None, Field(description="taskId is a custom task ID")] = None,
        team_id: Annotated[int | None, Field(description="Required with custom_task_ids")] = None,
    ) -> str:
        """Update a task. Assignees, group assignees and watchers take add/rem deltas."""
        params = TaskUpdate(
            **_only_supplied(
                custom_item_id=custom_item_id,
                name=name,
                description=description,
                markdown_content=markdown_content,
                status=status,
                priority=priority,
                due_date=due_date,
                due_date_time=due_date_time,
                parent=parent,
                time_estimate=time_estimate,
                start_date=start_date,
                start_date_time=start_date_time,
                points=points,
                assignees=assignees,
                group_assignees=group_assignees,
                watchers=watchers,
                archived=archived,
            )
        )
        query = TaskQuery(custom_task_ids=custom_task_ids, team_id=team_id)
        return _dump(await task.update_task(gateway, taskId, params, query))

    @_command(mcp, "delete-task", "deleting task", DESTRUCTIVE)
    async def delete_task(taskId: TaskId) -> str:
        """Delete a task."""
        await task.delete_task(gateway, taskId)
        return f"Task {taskId} deleted successfully"

    @_command(mcp, "bulk-create-tasks", "in bulk-create-tasks operation")
    async def bulk_create_tasks(listId: ListId, tasksData: list[TaskCreate]) -> str:
        """Create several tasks in a list. Failed items are reported, not fatal."""
        result = await batch.bulk_create_tasks(gateway, listId, tasksData, runner)
        return _dump(result.to_payload())

    @_command(mcp, "bulk-update-tasks", "in bulk-update-tasks operation")
    async def bulk_update_tasks(tasksData: list[TaskUpdateItem]) -> str:
        """Update several tasks; each item carries its own taskId."""
        result = await batch.bulk_update_tasks(gateway, tasksData, runner)
        return _dump(result.to_payload())

    @_command(mcp, "bulk-delete-tasks", "in bulk-delete-tasks operation", DESTRUCTIVE)
    async def bulk_delete_tasks(taskIds: list[str]) -> str:
        """Delete several tasks by ID."""
        result = await batch.bulk_delete_tasks(gateway, taskIds, runner)
        return _dump(result.to_payload())


# ---------------------------------------------------------------------------
# Docs, pages, audit logs
# ---------------------------------------------------------------------------


def _register_document_tools(mcp: FastMCP, gateway: ClickUpGateway) -> None:
    @_command(mcp, "search-documents", "searching documents", READ_ONLY)
    async def search_documents(teamId: TeamId, query: str | None = None) -> str:
        """Search the docs of a workspace."""
        return _dump(await document.search_docs(gateway, teamId, query))

    @_command(mcp, "create-document", "creating document")
    async def create_document(
        teamId: TeamId,
        name: str,
        content: str | None = None,
        assignees: list[str] | None = None,
        tags: list[str] | None = None,
        status: str | None = None,
        priority: int | None = None,
    ) -> str:
        """Create a doc in a workspace."""
        params = DocumentCreate(
            name=name,
            content=content,
            assignees=assignees,
            tags=tags,
            status=status,
            priority=priority,
        )
        return _dump(await document.create_document(gateway, teamId, params))

    @_command(mcp, "get-document", "getting document", READ_ONLY)
    async def get_document(teamId: TeamId, documentId: DocumentId) -> str:
        """Get one doc."""
        return _dump(await document.get_document(gateway, teamId, documentId))

    @_command(mcp, "get-doc-pages", "getting document pages", READ_ONLY)
    async def get_doc_pages(teamId: TeamId, documentId: DocumentId) -> str:
        """List the pages of a doc."""
        return _dump(await document.get_doc_pages(gateway, teamId, documentId))

    @_command(mcp, "create-page", "creating page")
    async def create_page(
        teamId: TeamId,
        documentId: DocumentId,
        title: str,
        content: str | None = None,
        parent: Annotated[str | None, Field(description="Parent page ID")] = None,
    ) -> str:
        """Add a page to a doc."""
        params = PageCreate(title=title, content=content, parent=parent)
        return _dump(await document.create_page(gateway, teamId, documentId, params))

    @_command(mcp, "get-page", "getting page", READ_ONLY)
    async def get_page(teamId: TeamId, documentId: DocumentId, pageId: PageId) -> str:
        """Get one page of a doc."""
        return _dump(await document.get_page(gateway, teamId, documentId, pageId))

    @_command(mcp, "edit-page", "editing page")
    async def edit_page(
        teamId: TeamId,
        documentId: DocumentId,
        pageId: PageId,
        title: str | None = None,
        content: str | None = None,
    ) -> str:
        """Change the title and/or content of a page."""
        params = PageEdit(title=title, content=content)
        return _dump(await document.edit_page(gateway, teamId, documentId, pageId, params))

    @_command(mcp, "create-audit-log", "creating audit log")
    async def create_audit_log(
        teamId: TeamId,
        applicability: Applicability,
        filter: AuditLogFilter | None = None,
        pagination: AuditLogPagination | None = None,
    ) -> str:
        """Query workspace audit logs (Enterprise plans only)."""
        params = AuditLogQuery(
            applicability=applicability,
            filter=filter or AuditLogFilter(),
            pagination=pagination,
        )
        return _dump(await audit.create_audit_log(gateway, teamId, params))


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def _register_prompts(mcp: FastMCP) -> None:
    @mcp.prompt(name="create-task-from-requirements")
    def create_task_from_requirements(requirements: str) -> str:
        """Turn free-form requirements into a create-task request."""
        return f"Create a ClickUp task based on these requirements:\n\n{requirements}"
