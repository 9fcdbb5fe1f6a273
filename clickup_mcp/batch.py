"""Bulk task helpers built on single-item operations.

Each bulk call folds over its input in order. A failing item is recorded
with its error and the fold moves on; only an error raised before the
first item (bad arguments) fails the call as a whole.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from clickup_mcp.errors import MissingIdentifier
from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.models import BatchFailure, BatchResult, TaskCreate, TaskUpdateItem
from clickup_mcp.operations import task as task_ops

logger = logging.getLogger(__name__)

T = TypeVar("T")

ItemOperation = Callable[[T], Awaitable[Any]]


class BatchRunner(ABC):
    @abstractmethod
    async def run(
        self,
        items: Sequence[T],
        operation: ItemOperation[T],
        *,
        input_key: str,
        keep_input: bool = False,
    ) -> BatchResult:
        """Apply operation to every item, isolating failures per item.

        With keep_input, a success records the item itself instead of the
        operation's return value (deletes return nothing useful).
        """


class SequentialBatchRunner(BatchRunner):
    """Strictly one item at a time, in input order."""

    async def run(
        self,
        items: Sequence[T],
        operation: ItemOperation[T],
        *,
        input_key: str,
        keep_input: bool = False,
    ) -> BatchResult:
        result = BatchResult(input_key=input_key)
        for item in items:
            result = await self._step(result, item, operation, keep_input)
        return result

    async def _step(
        self,
        result: BatchResult,
        item: T,
        operation: ItemOperation[T],
        keep_input: bool,
    ) -> BatchResult:
        try:
            value = await operation(item)
        except Exception as exc:
            logger.warning("Bulk item failed (%s=%r): %s", result.input_key, item, exc)
            result.failed.append(BatchFailure(input=item, error=str(exc)))
        else:
            result.succeeded.append(item if keep_input else value)
        return result


def _runner(runner: BatchRunner | None) -> BatchRunner:
    return runner or SequentialBatchRunner()


async def bulk_create_tasks(
    gateway: ClickUpGateway,
    list_id: str,
    tasks: Sequence[TaskCreate],
    runner: BatchRunner | None = None,
) -> BatchResult:
    async def create(item: TaskCreate) -> Any:
        return await task_ops.create_task(gateway, list_id, item)

    return await _runner(runner).run(tasks, create, input_key="taskData")


async def bulk_update_tasks(
    gateway: ClickUpGateway,
    tasks: Sequence[TaskUpdateItem],
    runner: BatchRunner | None = None,
) -> BatchResult:
    async def update(item: TaskUpdateItem) -> Any:
        if not item.task_id:
            raise MissingIdentifier("taskId")
        return await task_ops.update_task(gateway, item.task_id, item)

    return await _runner(runner).run(tasks, update, input_key="taskData")


async def bulk_delete_tasks(
    gateway: ClickUpGateway,
    task_ids: Sequence[str],
    runner: BatchRunner | None = None,
) -> BatchResult:
    async def delete(task_id: str) -> None:
        await task_ops.delete_task(gateway, task_id)

    return await _runner(runner).run(task_ids, delete, input_key="taskId", keep_input=True)
