"""Attribute term tools — the values of a product attribute (Red, Blue ...)."""

from typing import Any

from pydantic import Field

from .client import WooClient
from .models import (
    Context,
    PositiveId,
    SortOrder,
    ToolArgs,
    batch_body,
    id_field,
    require_field,
    require_id,
    scoped_item,
)
from .registry import ToolRegistry


class ListTermsArgs(ToolArgs):
    attribute_id: int = id_field("attributeId")
    context: Context | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1)
    search: str | None = None
    exclude: list[int] | None = None
    include: list[int] | None = None
    order: SortOrder | None = None
    orderby: str | None = None
    hide_empty: bool | None = None
    parent: int | None = None
    product: int | None = None
    slug: str | None = None


class TermIdArgs(ToolArgs):
    attribute_id: int = id_field("attributeId")
    term_id: int = id_field("termId")


class TermFields(ToolArgs):
    slug: str | None = None
    description: str | None = None
    menu_order: int | None = None


class CreateTermArgs(TermFields):
    attribute_id: int = id_field("attributeId")
    name: str = Field(min_length=1)


class UpdateTermArgs(TermFields):
    attribute_id: int = id_field("attributeId")
    term_id: int = id_field("termId")
    name: str | None = None


class DeleteTermArgs(TermIdArgs):
    force: bool = True


class BatchTermsArgs(ToolArgs):
    attribute_id: int = id_field("attributeId")
    create: list[dict[str, Any]] | None = None
    update: list[dict[str, Any]] | None = None
    delete: list[PositiveId] | None = None


def _path(attribute_id: int) -> str:
    return f"/products/attributes/{attribute_id}/terms"


async def list_product_attribute_terms(client: WooClient, args: ListTermsArgs) -> Any:
    """
    List the terms of an attribute.

    Args:
        attributeId: ID of the attribute
        search / include / exclude / hide_empty / product / slug ...: Filters

    Returns:
        List of terms
    """
    attribute_id = require_id("attributeId", args.attribute_id)
    return await client.get(_path(attribute_id), args.api_fields("attribute_id"))


async def get_product_attribute_term(client: WooClient, args: TermIdArgs) -> Any:
    """Retrieve one term of an attribute."""
    attribute_id = require_id("attributeId", args.attribute_id)
    term_id = require_id("termId", args.term_id)
    return await client.get(f"{_path(attribute_id)}/{term_id}")


async def create_product_attribute_term(client: WooClient, args: CreateTermArgs) -> Any:
    """
    Create a term for an attribute. ``name`` is mandatory.

    Returns:
        The created term
    """
    attribute_id = require_id("attributeId", args.attribute_id)
    require_field("name", args.name)
    return await client.post(_path(attribute_id), args.api_fields("attribute_id"))


async def update_product_attribute_term(client: WooClient, args: UpdateTermArgs) -> Any:
    attribute_id = require_id("attributeId", args.attribute_id)
    term_id = require_id("termId", args.term_id)
    body = args.api_fields("attribute_id", "term_id")
    return await client.put(f"{_path(attribute_id)}/{term_id}", body)


async def delete_product_attribute_term(client: WooClient, args: DeleteTermArgs) -> Any:
    """Delete an attribute term (force=true by default)."""
    attribute_id = require_id("attributeId", args.attribute_id)
    term_id = require_id("termId", args.term_id)
    return await client.delete(f"{_path(attribute_id)}/{term_id}", {"force": args.force})


async def batch_product_attribute_terms(client: WooClient, args: BatchTermsArgs) -> Any:
    """
    Create, update and delete terms of one attribute in a single request.

    The attribute ID is part of the URL and is removed from every item.
    """
    attribute_id = require_id("attributeId", args.attribute_id)
    create = [scoped_item(item, "attributeId") for item in args.create] if args.create is not None else None
    update = (
        [scoped_item(item, "attributeId", "termId") for item in args.update]
        if args.update is not None
        else None
    )
    return await client.post(f"{_path(attribute_id)}/batch", batch_body(create, update, args.delete))


def register(registry: ToolRegistry) -> None:
    registry.tool("listProductAttributeTerms", ListTermsArgs)(list_product_attribute_terms)
    registry.tool("getProductAttributeTerm", TermIdArgs)(get_product_attribute_term)
    registry.tool("createProductAttributeTerm", CreateTermArgs)(create_product_attribute_term)
    registry.tool(
        "updateProductAttributeTerm",
        UpdateTermArgs,
        description="Update an attribute term; only the fields provided are sent.",
    )(update_product_attribute_term)
    registry.tool("deleteProductAttributeTerm", DeleteTermArgs)(delete_product_attribute_term)
    registry.tool("batchProductAttributeTerms", BatchTermsArgs)(batch_product_attribute_terms)
