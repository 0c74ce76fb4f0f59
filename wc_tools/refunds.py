"""Refund tools — list refunds across all orders."""

from typing import Any, Literal

from pydantic import Field

from .client import WooClient
from .models import Context, SortOrder, ToolArgs
from .registry import ToolRegistry


class ListRefundsArgs(ToolArgs):
    context: Context | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1)
    search: str | None = None
    after: str | None = None
    before: str | None = None
    exclude: list[int] | None = None
    include: list[int] | None = None
    offset: int | None = None
    order: SortOrder | None = None
    orderby: Literal["date", "modified", "id", "include", "title", "slug"] | None = None
    parent: list[int] | None = None
    parent_exclude: list[int] | None = None
    dp: int | None = None


async def list_refunds(client: WooClient, args: ListRefundsArgs) -> Any:
    """List refunds across all orders. Only the filters you pass are sent."""
    return await client.get("/refunds", args.api_fields())


def register(registry: ToolRegistry) -> None:
    registry.tool("listRefunds", ListRefundsArgs)(list_refunds)
