"""Product variation tools — variations nested under a variable product."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from .client import WooClient
from .models import (
    MetaData,
    PositiveId,
    ToolArgs,
    ViewPagination,
    batch_body,
    id_field,
    require_id,
    scoped_item,
)
from .registry import ToolRegistry


class Dimensions(BaseModel):
    length: str | None = None
    width: str | None = None
    height: str | None = None


class ImageRef(BaseModel):
    id: int


class VariationAttribute(BaseModel):
    id: int
    option: str


class VariationFields(ToolArgs):
    regular_price: str | None = None
    sale_price: str | None = None
    sku: str | None = None
    description: str | None = None
    status: Literal["draft", "pending", "private", "publish"] | None = None
    virtual: bool | None = None
    downloadable: bool | None = None
    download_limit: int | None = None
    download_expiry: int | None = None
    tax_status: str | None = None
    tax_class: str | None = None
    manage_stock: bool | None = None
    stock_quantity: int | None = None
    stock_status: Literal["instock", "outofstock", "onbackorder"] | None = None
    backorders: Literal["no", "notify", "yes"] | None = None
    weight: str | None = None
    dimensions: Dimensions | None = None
    shipping_class: str | None = None
    image: ImageRef | None = None
    attributes: list[VariationAttribute] | None = None
    menu_order: int | None = None
    meta_data: list[MetaData] | None = None


class ListVariationsArgs(ViewPagination):
    product_id: int = id_field("productId")


class VariationIdArgs(ToolArgs):
    product_id: int = id_field("productId")
    variation_id: int = id_field("variationId")


class CreateVariationArgs(VariationFields):
    product_id: int = id_field("productId")


class UpdateVariationArgs(VariationFields):
    product_id: int = id_field("productId")
    variation_id: int = id_field("variationId")


class DeleteVariationArgs(VariationIdArgs):
    force: bool = True


class BatchVariationsArgs(ToolArgs):
    product_id: int = id_field("productId")
    create: list[dict[str, Any]] | None = None
    update: list[dict[str, Any]] | None = Field(
        default=None, description="Items carry their own id (or variationId)"
    )
    delete: list[PositiveId] | None = None


def _path(product_id: int) -> str:
    return f"/products/{product_id}/variations"


async def list_product_variations(client: WooClient, args: ListVariationsArgs) -> Any:
    """
    List the variations of a product.

    Args:
        productId: ID of the parent product
        page: Page number (default: 1)
        per_page: Items per page (default: 10)
        context: "view" or "edit" (default: view)

    Returns:
        List of variations
    """
    product_id = require_id("productId", args.product_id)
    return await client.get(_path(product_id), args.api_fields("product_id"))


async def get_product_variation(client: WooClient, args: VariationIdArgs) -> Any:
    """Retrieve one variation of a product."""
    product_id = require_id("productId", args.product_id)
    variation_id = require_id("variationId", args.variation_id)
    return await client.get(f"{_path(product_id)}/{variation_id}")


async def create_product_variation(client: WooClient, args: CreateVariationArgs) -> Any:
    """
    Create a variation for a variable product.

    Args:
        productId: ID of the parent product
        regular_price / sale_price / sku / stock_quantity ...: Variation data
        attributes: List of {"id": attribute id, "option": value}

    Returns:
        The created variation
    """
    product_id = require_id("productId", args.product_id)
    return await client.post(_path(product_id), args.api_fields("product_id"))


async def update_product_variation(client: WooClient, args: UpdateVariationArgs) -> Any:
    """Update a variation; only the fields provided are sent."""
    product_id = require_id("productId", args.product_id)
    variation_id = require_id("variationId", args.variation_id)
    body = args.api_fields("product_id", "variation_id")
    return await client.put(f"{_path(product_id)}/{variation_id}", body)


async def delete_product_variation(client: WooClient, args: DeleteVariationArgs) -> Any:
    """Delete a variation (force=true by default)."""
    product_id = require_id("productId", args.product_id)
    variation_id = require_id("variationId", args.variation_id)
    return await client.delete(f"{_path(product_id)}/{variation_id}", {"force": args.force})


async def batch_product_variations(client: WooClient, args: BatchVariationsArgs) -> Any:
    """
    Create, update and delete variations of one product in a single request.

    The product ID only builds the URL; it is removed from every item.

    Args:
        productId: ID of the parent product
        create: Variations to create
        update: Variations to update, each with its id
        delete: Variation IDs to delete

    Returns:
        Batch result grouped by create / update / delete
    """
    product_id = require_id("productId", args.product_id)
    create = [scoped_item(item, "productId") for item in args.create] if args.create is not None else None
    update = (
        [scoped_item(item, "productId", "variationId") for item in args.update]
        if args.update is not None
        else None
    )
    return await client.post(f"{_path(product_id)}/batch", batch_body(create, update, args.delete))


def register(registry: ToolRegistry) -> None:
    registry.tool("listProductVariations", ListVariationsArgs)(list_product_variations)
    registry.tool("getProductVariation", VariationIdArgs)(get_product_variation)
    registry.tool("createProductVariation", CreateVariationArgs)(create_product_variation)
    registry.tool("updateProductVariation", UpdateVariationArgs)(update_product_variation)
    registry.tool("deleteProductVariation", DeleteVariationArgs)(delete_product_variation)
    registry.tool("batchProductVariations", BatchVariationsArgs)(batch_product_variations)
