"""Typed exception hierarchy for ClickUp calls."""


class ClickUpError(Exception):
    """Base exception for all clickup-mcp errors."""


class ApiError(ClickUpError):
    """Raised when the ClickUp API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"ClickUp API error ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponse(ClickUpError):
    """Raised when a 2xx response body is not valid JSON."""

    def __init__(self, text: str) -> None:
        super().__init__(f"ClickUp API returned a non-JSON body: {text}")
        self.text = text


class MissingIdentifier(ClickUpError):
    """Raised for a bulk item that lacks the identifier it needs."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing {field}")
        self.field = field
