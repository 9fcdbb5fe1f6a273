"""ClickUp REST gateway: the single place that talks HTTP."""

import logging
from typing import Any, Literal

import httpx

from clickup_mcp.errors import ApiError, MalformedResponse
from clickup_mcp.settings import ClickUpSettings

logger = logging.getLogger(__name__)

Method = Literal["GET", "POST", "PUT", "DELETE"]
ApiVersion = Literal["v2", "v3"]

# ClickUp answers some mutations with 200/204 and no content.
_EMPTY_BODY_SUCCESS_METHODS = frozenset({"PUT", "DELETE"})


class ClickUpGateway:
    def __init__(self, settings: ClickUpSettings) -> None:
        if not settings.api_key:
            raise RuntimeError("api_key is required")
        self._base_urls: dict[str, str] = {
            "v2": settings.base_url_v2.rstrip("/"),
            "v3": settings.base_url_v3.rstrip("/"),
        }
        self._headers = {"Authorization": settings.api_key.get_secret_value()}
        self._client = httpx.AsyncClient(timeout=settings.timeout)

    async def __aenter__(self) -> "ClickUpGateway":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def url_for(self, path: str, api_version: ApiVersion = "v2") -> str:
        return f"{self._base_urls[api_version]}{path}"

    async def request(
        self,
        path: str,
        method: Method = "GET",
        body: Any = None,
        api_version: ApiVersion = "v2",
    ) -> Any:
        """Issue one request and return the parsed JSON body.

        Raises ApiError on a non-2xx status and MalformedResponse when a
        non-empty success body is not JSON. Nothing is retried.
        """
        url = self.url_for(path, api_version)
        logger.debug("%s %s %s", method, api_version, path)

        headers = dict(self._headers)
        kwargs: dict[str, Any] = {}
        if body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body

        response = await self._client.request(method, url, headers=headers, **kwargs)
        text = response.text

        if not response.is_success:
            logger.warning("ClickUp %s %s returned %s", method, path, response.status_code)
            raise ApiError(response.status_code, text)

        if not text.strip():
            return {"success": True} if method in _EMPTY_BODY_SUCCESS_METHODS else {}

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse(text) from exc
