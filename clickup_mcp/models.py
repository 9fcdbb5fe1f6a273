"""Shared pydantic models: request parameters, response envelopes, batch results."""

from typing import Any, Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class Payload(BaseModel):
    """Base for request bodies. Unsupplied fields are never sent."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Spaces, folders, lists
# ---------------------------------------------------------------------------


class SpaceCreate(Payload):
    name: str
    multiple_assignees: bool | None = None
    features: dict[str, Any] | None = None


class SpaceUpdate(Payload):
    name: str | None = None
    color: str | None = None
    private: bool | None = None
    admin_can_manage: bool | None = None
    multiple_assignees: bool | None = None
    features: dict[str, Any] | None = None


class FolderCreate(Payload):
    name: str


class FolderUpdate(Payload):
    name: str


class FolderTemplateOptions(Payload):
    """Options for POST /space/{id}/folder/template/{template_id}."""

    name: str
    return_immediately: bool | None = None
    content: str | None = None
    time_estimate: bool | None = None
    automation: bool | None = None
    include_views: bool | None = None
    old_due_date: bool | None = None
    old_start_date: bool | None = None
    old_followers: bool | None = None
    comment_attachments: bool | None = None
    recur_settings: bool | None = None
    old_tags: bool | None = None
    old_statuses: bool | None = None
    subtasks: bool | None = None
    custom_type: bool | None = None
    old_assignees: bool | None = None
    attachments: bool | None = None
    comment: bool | None = None
    old_status: bool | None = None
    external_dependencies: bool | None = None
    internal_dependencies: bool | None = None
    priority: bool | None = None
    custom_fields: bool | None = None
    old_checklists: bool | None = None
    relationships: bool | None = None
    old_subtask_assignees: bool | None = None
    start_date: AwareDatetime | None = None
    due_date: AwareDatetime | None = None
    remap_start_date: bool | None = None
    skip_weekends: bool | None = None
    archived: Literal[1, 2] | None = None


class ListCreate(Payload):
    name: str
    content: str | None = None
    due_date: int | None = None  # ms timestamp
    due_date_time: bool | None = None
    priority: int | None = Field(default=None, ge=1, le=4)
    assignee: int | None = None  # user ID
    status: str | None = None
    include_markdown_description: bool | None = None


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


class TaskCreate(Payload):
    name: str
    description: str | None = None
    priority: int | None = None
    # Free-form string; not the same field as TaskUpdate.due_date.
    due_date: str | None = Field(default=None, alias="dueDate")
    assignees: list[str] | None = None
    tags: list[str] | None = None


class AssigneeDelta(Payload):
    add: list[int] | None = None
    rem: list[int] | None = None


class TaskUpdate(Payload):
    """Body for PUT /task/{id}. Only explicitly supplied fields are sent."""

    custom_item_id: int | None = None
    name: str | None = None
    description: str | None = None  # " " clears the description
    markdown_content: str | None = None  # overrides description
    status: str | None = None
    priority: int | None = None
    due_date: int | None = None  # ms timestamp
    due_date_time: bool | None = None
    parent: str | None = None
    time_estimate: int | None = None
    start_date: int | None = None  # ms timestamp
    start_date_time: bool | None = None
    points: int | float | None = None
    assignees: AssigneeDelta | None = None
    group_assignees: AssigneeDelta | None = None
    watchers: AssigneeDelta | None = None
    archived: bool | None = None

    def to_body(self) -> dict[str, Any]:
        # exclude_unset keeps an explicit custom_item_id=None in the body
        body = self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude={"task_id"})
        if body.get("due_date") is not None and "due_date_time" not in body:
            body["due_date_time"] = True
        if body.get("start_date") is not None and "start_date_time" not in body:
            body["start_date_time"] = True
        return body


class TaskUpdateItem(TaskUpdate):
    """One element of a bulk update. task_id may be absent; the batch reports it."""

    task_id: str | None = Field(default=None, alias="taskId")


class TaskQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    custom_task_ids: bool | None = None
    team_id: int | None = None


# ---------------------------------------------------------------------------
# Docs, pages, audit logs (API v3)
# ---------------------------------------------------------------------------


class DocumentCreate(Payload):
    name: str
    content: str | None = None
    assignees: list[str] | None = None
    tags: list[str] | None = None
    status: str | None = None
    priority: int | None = None


class PageCreate(Payload):
    title: str
    content: str | None = None
    parent: str | None = None


class PageEdit(Payload):
    # ClickUp names the page title "name" on edit.
    title: str | None = Field(default=None, serialization_alias="name")
    content: str | None = None


Applicability = Literal["auth-and-security", "user-activity"]


class AuditLogFilter(Payload):
    workspace_id: str | None = Field(default=None, alias="workspaceId")
    user_id: list[str] | None = Field(default=None, alias="userId")
    user_email: list[str] | None = Field(default=None, alias="userEmail")
    event_type: list[str] | None = Field(default=None, alias="eventType")
    event_status: str | None = Field(default=None, alias="eventStatus")
    start_time: int | None = Field(default=None, alias="startTime")
    end_time: int | None = Field(default=None, alias="endTime")


class AuditLogPagination(Payload):
    page_rows: int | None = Field(default=None, alias="pageRows")
    page_timestamp: int | None = Field(default=None, alias="pageTimestamp")
    page_direction: Literal["before", "after"] | None = Field(default=None, alias="pageDirection")


class AuditLogQuery(Payload):
    """Body for POST /workspaces/{id}/auditlogs (Enterprise plans only)."""

    applicability: Applicability
    filter: AuditLogFilter = AuditLogFilter()
    pagination: AuditLogPagination | None = None


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------


class Envelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class TeamsEnvelope(Envelope):
    teams: list[dict[str, Any]] = []


class SpacesEnvelope(Envelope):
    spaces: list[dict[str, Any]] = []


class FoldersEnvelope(Envelope):
    folders: list[dict[str, Any]] = []


class ListsEnvelope(Envelope):
    lists: list[dict[str, Any]] = []


class TasksEnvelope(Envelope):
    tasks: list[dict[str, Any]] = []


class DocsEnvelope(Envelope):
    docs: list[dict[str, Any]] = []


# ---------------------------------------------------------------------------
# Batch results
# ---------------------------------------------------------------------------


class BatchFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    input: Any
    error: str


class BatchResult(BaseModel):
    """Outcome of a bulk call: successes and failures, each in input order."""

    input_key: str  # "taskData" or "taskId" in the serialized failures
    succeeded: list[Any] = []
    failed: list[BatchFailure] = []

    def to_payload(self) -> dict[str, Any]:
        return {
            "succeeded": self.succeeded,
            "failed": [{self.input_key: _jsonable(f.input), "error": f.error} for f in self.failed],
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, TaskUpdate):
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(value, Payload):
        return value.to_body()
    return value
