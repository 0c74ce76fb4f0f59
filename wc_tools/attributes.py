"""Product attribute tools — global attributes such as Color or Size."""

from typing import Any, Literal

from pydantic import Field

from .client import WooClient
from .models import (
    PositiveId,
    ToolArgs,
    ViewPagination,
    batch_body,
    dump_items,
    id_field,
    item_id_field,
    require_field,
    require_id,
)
from .registry import ToolRegistry

AttributeOrder = Literal["menu_order", "name", "name_num", "id"]


class AttributeFields(ToolArgs):
    slug: str | None = None
    type: str | None = None
    order_by: AttributeOrder | None = None
    has_archives: bool | None = None


class AttributeIdArgs(ToolArgs):
    attribute_id: int = id_field("attributeId")


class CreateAttributeArgs(AttributeFields):
    name: str = Field(min_length=1)


class UpdateAttributeArgs(AttributeFields):
    attribute_id: int = id_field("attributeId")
    name: str | None = None


class DeleteAttributeArgs(AttributeIdArgs):
    force: bool = True


class AttributeUpdateItem(AttributeFields):
    id: int = item_id_field("attributeId")
    name: str | None = None


class BatchAttributesArgs(ToolArgs):
    create: list[CreateAttributeArgs] | None = None
    update: list[AttributeUpdateItem] | None = None
    delete: list[PositiveId] | None = None


async def list_product_attributes(client: WooClient, args: ViewPagination) -> Any:
    """
    List global product attributes.

    Args:
        context: "view" or "edit" (default: view)
        page: Page number (default: 1)
        per_page: Items per page (default: 10)

    Returns:
        List of attributes
    """
    return await client.get("/products/attributes", args.api_fields())


async def get_product_attribute(client: WooClient, args: AttributeIdArgs) -> Any:
    """Retrieve a product attribute by ID."""
    attribute_id = require_id("attributeId", args.attribute_id)
    return await client.get(f"/products/attributes/{attribute_id}")


async def create_product_attribute(client: WooClient, args: CreateAttributeArgs) -> Any:
    """
    Create a product attribute. ``name`` is mandatory.

    Args:
        name: Attribute name
        slug: Unique alphanumeric identifier
        type: Attribute type (default on the remote side: "select")
        order_by: "menu_order", "name", "name_num" or "id"
        has_archives: Enable archives for the attribute

    Returns:
        The created attribute
    """
    require_field("name", args.name)
    return await client.post("/products/attributes", args.api_fields())


async def update_product_attribute(client: WooClient, args: UpdateAttributeArgs) -> Any:
    """Update a product attribute; only the fields provided are sent."""
    attribute_id = require_id("attributeId", args.attribute_id)
    return await client.put(f"/products/attributes/{attribute_id}", args.api_fields("attribute_id"))


async def delete_product_attribute(client: WooClient, args: DeleteAttributeArgs) -> Any:
    """Delete a product attribute (force=true by default)."""
    attribute_id = require_id("attributeId", args.attribute_id)
    return await client.delete(f"/products/attributes/{attribute_id}", {"force": args.force})


async def batch_product_attributes(client: WooClient, args: BatchAttributesArgs) -> Any:
    """Create, update and delete product attributes in one request."""
    body = batch_body(dump_items(args.create), dump_items(args.update), args.delete)
    return await client.post("/products/attributes/batch", body)


def register(registry: ToolRegistry) -> None:
    registry.tool("listProductAttributes", ViewPagination)(list_product_attributes)
    registry.tool("getProductAttribute", AttributeIdArgs)(get_product_attribute)
    registry.tool("createProductAttribute", CreateAttributeArgs)(create_product_attribute)
    registry.tool("updateProductAttribute", UpdateAttributeArgs)(update_product_attribute)
    registry.tool("deleteProductAttribute", DeleteAttributeArgs)(delete_product_attribute)
    registry.tool("batchProductAttributes", BatchAttributesArgs)(batch_product_attributes)
