"""Shipping class tools."""

from typing import Any

from pydantic import Field

from .client import WooClient
from .models import (
    Context,
    PositiveId,
    SortOrder,
    ToolArgs,
    batch_body,
    dump_items,
    id_field,
    item_id_field,
    require_field,
    require_id,
)
from .registry import ToolRegistry

PATH = "/products/shipping_classes"


class ListShippingClassesArgs(ToolArgs):
    context: Context | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1)
    search: str | None = None
    exclude: list[int] | None = None
    include: list[int] | None = None
    offset: int | None = None
    order: SortOrder | None = None
    orderby: str | None = None
    hide_empty: bool | None = None
    product: int | None = None
    slug: str | None = None


class ShippingClassIdArgs(ToolArgs):
    shipping_class_id: int = id_field("shippingClassId")


class CreateShippingClassArgs(ToolArgs):
    name: str = Field(min_length=1)
    slug: str | None = None
    description: str | None = None


class UpdateShippingClassArgs(ShippingClassIdArgs):
    name: str | None = None
    slug: str | None = None
    description: str | None = None


class DeleteShippingClassArgs(ShippingClassIdArgs):
    force: bool = True


class ShippingClassUpdateItem(ToolArgs):
    id: int = item_id_field("shippingClassId")
    name: str | None = None
    slug: str | None = None
    description: str | None = None


class BatchShippingClassesArgs(ToolArgs):
    create: list[CreateShippingClassArgs] | None = None
    update: list[ShippingClassUpdateItem] | None = None
    delete: list[PositiveId] | None = None


async def list_shipping_classes(client: WooClient, args: ListShippingClassesArgs) -> Any:
    """List shipping classes. Only the filters you pass are sent."""
    return await client.get(PATH, args.api_fields())


async def get_shipping_class(client: WooClient, args: ShippingClassIdArgs) -> Any:
    """Retrieve a shipping class by ID."""
    class_id = require_id("shippingClassId", args.shipping_class_id)
    return await client.get(f"{PATH}/{class_id}")


async def create_shipping_class(client: WooClient, args: CreateShippingClassArgs) -> Any:
    """
    Create a shipping class.

    Args:
        name: Shipping class name (required)
        slug: Unique alphanumeric identifier
        description: HTML description

    Returns:
        The created shipping class
    """
    require_field("name", args.name)
    return await client.post(PATH, args.api_fields())


async def update_shipping_class(client: WooClient, args: UpdateShippingClassArgs) -> Any:
    """Update a shipping class; only the fields provided are sent."""
    class_id = require_id("shippingClassId", args.shipping_class_id)
    return await client.put(f"{PATH}/{class_id}", args.api_fields("shipping_class_id"))


async def delete_shipping_class(client: WooClient, args: DeleteShippingClassArgs) -> Any:
    """Delete a shipping class (force=true by default)."""
    class_id = require_id("shippingClassId", args.shipping_class_id)
    return await client.delete(f"{PATH}/{class_id}", {"force": args.force})


async def batch_shipping_classes(client: WooClient, args: BatchShippingClassesArgs) -> Any:
    """Create, update and delete shipping classes in one request."""
    body = batch_body(dump_items(args.create), dump_items(args.update), args.delete)
    return await client.post(f"{PATH}/batch", body)


def register(registry: ToolRegistry) -> None:
    registry.tool("listShippingClasses", ListShippingClassesArgs)(list_shipping_classes)
    registry.tool("getShippingClass", ShippingClassIdArgs)(get_shipping_class)
    registry.tool("createShippingClass", CreateShippingClassArgs)(create_shipping_class)
    registry.tool("updateShippingClass", UpdateShippingClassArgs)(update_shipping_class)
    registry.tool("deleteShippingClass", DeleteShippingClassArgs)(delete_shipping_class)
    registry.tool("batchShippingClasses", BatchShippingClassesArgs)(batch_shipping_classes)
