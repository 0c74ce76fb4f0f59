"""Error taxonomy for WooCommerce tools.

Resource functions, the session and the HTTP client raise these; the tool
registry is the only place that catches them and turns them into the
``Error in <tool>: <message>`` envelope.
"""

import httpx
from pydantic import ValidationError

from wc_shared.constants import CREDENTIAL_ENV_VARS, SESSION_NOT_CONFIGURED_MESSAGE


class WooToolError(Exception):
    """Base class for every error a tool can report."""


class MissingCredentials(WooToolError):
    def __init__(self) -> None:
        super().__init__(f"missing {', '.join(CREDENTIAL_ENV_VARS[:-1])} or {CREDENTIAL_ENV_VARS[-1]}")


class SessionNotConfigured(WooToolError):
    def __init__(self) -> None:
        super().__init__(SESSION_NOT_CONFIGURED_MESSAGE)


class MissingIdentifier(WooToolError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"missing {name}")


class MissingRequiredField(WooToolError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing required field {field}")


class RemoteRequestFailure(WooToolError):
    """Anything that went wrong on the wire or on the remote side."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_httpx(cls, exc: httpx.HTTPError) -> "RemoteRequestFailure":
        if isinstance(exc, httpx.HTTPStatusError):
            response = exc.response
            message = f"Request failed with status code {response.status_code}"
            remote = _remote_message(response)
            if remote:
                message = f"{message}: {remote}"
            return cls(message, status_code=response.status_code)
        return cls(str(exc) or exc.__class__.__name__)


class InputValidationFailure(WooToolError):
    def __init__(self, exc: ValidationError) -> None:
        self.errors = exc.errors(include_url=False)
        super().__init__("invalid input: " + "; ".join(_describe(err) for err in self.errors))


def _describe(err: dict) -> str:
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def _remote_message(response: httpx.Response) -> str:
    """Pull ``message`` out of a WooCommerce error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()[:200]
    if isinstance(body, dict):
        return str(body.get("message") or body.get("code") or "")
    return ""
