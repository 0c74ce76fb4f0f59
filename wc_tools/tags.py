"""Product tag tools."""

from typing import Any, Literal

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


class ListTagsArgs(ToolArgs):
    context: Context | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1)
    search: str | None = None
    exclude: list[int] | None = None
    include: list[int] | None = None
    offset: int | None = None
    order: SortOrder | None = None
    orderby: Literal["id", "include", "name", "slug", "term_group", "description", "count"] | None = None
    hide_empty: bool | None = None
    product: int | None = None
    slug: str | None = None


class TagIdArgs(ToolArgs):
    tag_id: int = id_field("tagId")


class CreateTagArgs(ToolArgs):
    name: str = Field(min_length=1)
    slug: str | None = None
    description: str | None = None


class UpdateTagArgs(TagIdArgs):
    name: str | None = None
    slug: str | None = None
    description: str | None = None


class DeleteTagArgs(TagIdArgs):
    force: bool = True


class TagUpdateItem(ToolArgs):
    id: int = item_id_field("tagId")
    name: str | None = None
    slug: str | None = None
    description: str | None = None


class BatchTagsArgs(ToolArgs):
    create: list[CreateTagArgs] | None = None
    update: list[TagUpdateItem] | None = None
    delete: list[PositiveId] | None = None


async def list_product_tags(client: WooClient, args: ListTagsArgs) -> Any:
    """List product tags. Only the filters you pass are sent."""
    return await client.get("/products/tags", args.api_fields())


async def get_product_tag(client: WooClient, args: TagIdArgs) -> Any:
    """
    Retrieve a product tag by ID.

    Args:
        tagId: ID of the tag

    Returns:
        Tag details
    """
    tag_id = require_id("tagId", args.tag_id)
    return await client.get(f"/products/tags/{tag_id}")


async def create_product_tag(client: WooClient, args: CreateTagArgs) -> Any:
    """Create a product tag. ``name`` is mandatory."""
    require_field("name", args.name)
    return await client.post("/products/tags", args.api_fields())


async def update_product_tag(client: WooClient, args: UpdateTagArgs) -> Any:
    """Update a product tag; only the fields provided are sent."""
    tag_id = require_id("tagId", args.tag_id)
    return await client.put(f"/products/tags/{tag_id}", args.api_fields("tag_id"))


async def delete_product_tag(client: WooClient, args: DeleteTagArgs) -> Any:
    """Delete a product tag (force=true by default)."""
    tag_id = require_id("tagId", args.tag_id)
    return await client.delete(f"/products/tags/{tag_id}", {"force": args.force})


async def batch_product_tags(client: WooClient, args: BatchTagsArgs) -> Any:
    """
    Create, update and delete tags in one request.

    Args:
        create: Tags to create, each with a name
        update: Tags to update, each with its id (or tagId)
        delete: Tag IDs to delete

    Returns:
        Batch result grouped by create / update / delete
    """
    body = batch_body(dump_items(args.create), dump_items(args.update), args.delete)
    return await client.post("/products/tags/batch", body)


def register(registry: ToolRegistry) -> None:
    registry.tool("listProductTags", ListTagsArgs)(list_product_tags)
    registry.tool("getProductTag", TagIdArgs)(get_product_tag)
    registry.tool("createProductTag", CreateTagArgs)(create_product_tag)
    registry.tool("updateProductTag", UpdateTagArgs)(update_product_tag)
    registry.tool("deleteProductTag", DeleteTagArgs)(delete_product_tag)
    registry.tool("batchProductTags", BatchTagsArgs)(batch_product_tags)
