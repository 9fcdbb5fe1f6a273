"""Shared test fixtures."""

from collections.abc import AsyncIterator

import pytest

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.settings import ClickUpSettings

API_KEY = "pk_test_123"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CLICKUP_* environment out of the tests."""
    for var in (
        "CLICKUP_API_KEY",
        "CLICKUP_DEFAULT_PROFILE",
        "CLICKUP_BASE_URL_V2",
        "CLICKUP_BASE_URL_V3",
        "CLICKUP_TIMEOUT",
        "CLICKUP_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings() -> ClickUpSettings:
    return ClickUpSettings(api_key=API_KEY)  # type: ignore[arg-type]


@pytest.fixture
async def gateway(settings: ClickUpSettings) -> AsyncIterator[ClickUpGateway]:
    async with ClickUpGateway(settings) as gw:
        yield gw


@pytest.fixture
def sample_task() -> dict:
    return {
        "id": "86abc",
        "name": "Write release notes",
        "status": {"status": "to do"},
        "priority": {"id": "2", "priority": "high"},
        "assignees": [{"id": 183, "username": "jane"}],
        "tags": [{"name": "docs"}],
        "list": {"id": "L1"},
    }


@pytest.fixture
def sample_team() -> dict:
    return {"id": "9001", "name": "Acme", "color": "#7B68EE", "members": []}
