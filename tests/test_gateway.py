"""Tests for ClickUpGateway using pytest-httpx."""

import json

import pytest
from pytest_httpx import HTTPXMock

from clickup_mcp.errors import ApiError, MalformedResponse
from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.settings import DEFAULT_BASE_URL_V2, DEFAULT_BASE_URL_V3, ClickUpSettings


class TestConstruction:
    def test_requires_api_key(self) -> None:
        with pytest.raises(RuntimeError, match="api_key is required"):
            ClickUpGateway(ClickUpSettings())

    def test_url_for_versions(self, gateway: ClickUpGateway) -> None:
        assert gateway.url_for("/team") == f"{DEFAULT_BASE_URL_V2}/team"
        assert gateway.url_for("/workspaces/1/docs", "v3") == f"{DEFAULT_BASE_URL_V3}/workspaces/1/docs"

    def test_base_url_trailing_slash_stripped(self) -> None:
        s = ClickUpSettings(api_key="pk", base_url_v2="http://localhost:9000/api/v2/")  # type: ignore[arg-type]
        assert ClickUpGateway(s).url_for("/team") == "http://localhost:9000/api/v2/team"


class TestRequest:
    async def test_sends_auth_header(self, gateway: ClickUpGateway, settings: ClickUpSettings, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{DEFAULT_BASE_URL_V2}/team", json={"teams": []})
        await gateway.request("/team")

        request = httpx_mock.get_request()
        assert request is not None
        assert request.method == "GET"
        assert request.headers["Authorization"] == settings.api_key.get_secret_value()  # type: ignore[union-attr]
        assert "Content-Type" not in request.headers

    async def test_body_sent_as_json(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{DEFAULT_BASE_URL_V2}/list/L1/task", method="POST", json={"id": "t1"})
        result = await gateway.request("/list/L1/task", "POST", {"name": "x"})

        assert result == {"id": "t1"}
        request = httpx_mock.get_request()
        assert request is not None
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"name": "x"}

    async def test_v3_root(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{DEFAULT_BASE_URL_V3}/workspaces/9/docs", json={"docs": []})
        assert await gateway.request("/workspaces/9/docs", api_version="v3") == {"docs": []}

    @pytest.mark.parametrize("method", ["PUT", "DELETE"])
    async def test_empty_body_on_mutation_is_success(
        self, gateway: ClickUpGateway, httpx_mock: HTTPXMock, method: str
    ) -> None:
        httpx_mock.add_response(url=f"{DEFAULT_BASE_URL_V2}/task/t1", method=method, status_code=204)
        assert await gateway.request("/task/t1", method) == {"success": True}  # type: ignore[arg-type]

    async def test_empty_body_on_get_is_empty_object(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{DEFAULT_BASE_URL_V2}/task/t1", text="")
        assert await gateway.request("/task/t1") == {}

    async def test_empty_body_on_post_is_empty_object(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{DEFAULT_BASE_URL_V2}/space/s1/folder", method="POST", text="")
        assert await gateway.request("/space/s1/folder", "POST", {"name": "f"}) == {}

    async def test_non_json_body_raises_malformed(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{DEFAULT_BASE_URL_V2}/team", text="<html>gateway</html>")
        with pytest.raises(MalformedResponse) as excinfo:
            await gateway.request("/team")
        assert excinfo.value.text == "<html>gateway</html>"

    async def test_error_status_raises_api_error(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{DEFAULT_BASE_URL_V2}/task/nope",
            status_code=404,
            text='{"err":"Task not found","ECODE":"ITEM_013"}',
        )
        with pytest.raises(ApiError, match=r"ClickUp API error \(404\)") as excinfo:
            await gateway.request("/task/nope")
        assert excinfo.value.status_code == 404
        assert "ITEM_013" in excinfo.value.body

    async def test_error_is_not_retried(self, gateway: ClickUpGateway, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{DEFAULT_BASE_URL_V2}/team", status_code=429, text="rate limited")
        with pytest.raises(ApiError):
            await gateway.request("/team")
        assert len(httpx_mock.get_requests()) == 1
