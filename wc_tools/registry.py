"""Tool registry — binds resource functions to named, validated MCP tools.

Every tool invocation goes through :meth:`ToolRegistry.invoke`, which
validates the raw arguments against the tool's pydantic model, runs the
resource function with the shared client and returns an explicit outcome.
``invoke`` never raises: whatever goes wrong comes back as a
:class:`ToolFailure` and is rendered as ``Error in <tool>: <message>``.
"""

import inspect
import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import mcp.types as types
from pydantic import BaseModel, ValidationError

from .client import WooClient
from .errors import InputValidationFailure, WooToolError
from .models import ToolArgs

logger = logging.getLogger("wc_mcp.registry")

Handler = Callable[[WooClient, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    args_model: type[ToolArgs]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        return self.args_model.model_json_schema(by_alias=True)


class ToolSuccess(BaseModel):
    tool: str
    payload: Any = None


class ToolFailure(BaseModel):
    tool: str
    message: str


ToolOutcome = ToolSuccess | ToolFailure


def render(outcome: ToolOutcome) -> list[types.TextContent]:
    """Turn an outcome into the single text item an MCP client receives."""
    if isinstance(outcome, ToolSuccess):
        text = json.dumps(outcome.payload, ensure_ascii=False)
    else:
        text = f"Error in {outcome.tool}: {outcome.message}"
    return [types.TextContent(type="text", text=text)]


class ToolRegistry:
    def __init__(self, client: WooClient | None = None) -> None:
        self.client = client or WooClient()
        self._tools: dict[str, ToolSpec] = {}

    def tool(self, name: str, args_model: type[ToolArgs], description: str | None = None):
        """Decorator registering ``fn(client, args)`` as the tool ``name``."""

        def decorator(fn: Handler) -> Handler:
            if name in self._tools:
                raise ValueError(f"Tool {name} is already registered")
            doc = description or inspect.getdoc(fn) or name
            self._tools[name] = ToolSpec(name, doc, args_model, fn)
            return fn

        return decorator

    @property
    def tools(self) -> dict[str, ToolSpec]:
        return dict(self._tools)

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
            for spec in self._tools.values()
        ]

    async def invoke(self, name: str, arguments: dict[str, Any] | None) -> ToolOutcome:
        logger.info("Tool %s called", name)
        try:
            spec = self._tools.get(name)
            if spec is None:
                raise WooToolError(f"unknown tool {name}")
            try:
                args = spec.args_model.model_validate(arguments or {})
            except ValidationError as e:
                raise InputValidationFailure(e) from e
            payload = await spec.handler(self.client, args)
        except WooToolError as e:
            logger.warning("Tool %s failed: %s", name, e)
            return ToolFailure(tool=name, message=str(e))
        except Exception as e:
            logger.exception("Tool %s raised unexpectedly", name)
            return ToolFailure(tool=name, message=str(e) or e.__class__.__name__)
        return ToolSuccess(tool=name, payload=payload)

    async def call(self, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        return render(await self.invoke(name, arguments))
