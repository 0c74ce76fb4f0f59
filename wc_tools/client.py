"""HTTP client binding for the WooCommerce REST API.

One ``WooClient`` exists per process. It owns the :class:`Session` and
opens an ``httpx.AsyncClient`` per request from the session's current
state, so whatever ``authenticate`` configured last is what every request
uses.
"""

import logging
from typing import Any

import httpx

from .config import API_TIMEOUT
from .errors import RemoteRequestFailure
from .session import Session

logger = logging.getLogger("wc_mcp.client")


def encode_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop ``None`` values and send list filters as repeated ``name[]`` keys."""
    if not params:
        return None
    encoded: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            encoded[f"{key}[]"] = list(value)
        else:
            encoded[key] = value
    return encoded or None


class WooClient:
    def __init__(
        self,
        session: Session | None = None,
        timeout: float = API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.session = session or Session()
        self.timeout = timeout
        self._transport = transport

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("DELETE", path, params=params)

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Issue one request against the configured store and return the decoded body."""
        state = self.session.state

        kwargs: dict[str, Any] = {"params": encode_params(params)}
        if body is not None:
            kwargs["json"] = body

        try:
            async with httpx.AsyncClient(
                base_url=state.base_url,
                auth=state.auth,
                headers=state.headers,
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = await client.request(method, path, **kwargs)
                logger.debug("%s %s -> %s", method, path, resp.status_code)
                resp.raise_for_status()
                if not resp.content:
                    return None
                return resp.json()
        except httpx.HTTPError as e:
            raise RemoteRequestFailure.from_httpx(e) from e
        except ValueError as e:
            raise RemoteRequestFailure(f"Invalid JSON in response: {e}") from e
