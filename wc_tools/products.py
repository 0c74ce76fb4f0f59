"""Product tools — list, get, create, update, delete products."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from .client import WooClient
from .models import OpenToolArgs, Pagination, ToolArgs, id_field, require_field, require_id
from .registry import ToolRegistry


class CategoryRef(BaseModel):
    id: int


class ProductImage(BaseModel):
    id: int | None = None
    src: str | None = None


class ProductIdArgs(ToolArgs):
    product_id: int = id_field("productId")


class CreateProductArgs(OpenToolArgs):
    """Known product fields; any other field is forwarded as given."""

    name: str = Field(min_length=1)
    type: Literal["simple", "grouped", "external", "variable"] | None = None
    regular_price: str | None = None
    description: str | None = None
    short_description: str | None = None
    sku: str | None = None
    price: str | None = None
    sale_price: str | None = None
    categories: list[CategoryRef] | None = None
    images: list[ProductImage] | None = None


class UpdateProductArgs(ProductIdArgs):
    data: dict[str, Any]


class DeleteProductArgs(ProductIdArgs):
    force: bool = True


async def list_products(client: WooClient, args: Pagination) -> Any:
    """
    List WooCommerce products (paginated).

    Args:
        per_page: Items per page (default: 10)
        page: Page number (default: 1)

    Returns:
        List of products
    """
    return await client.get("/products", args.api_fields())


async def get_product(client: WooClient, args: ProductIdArgs) -> Any:
    """
    Retrieve a product by ID.

    Args:
        productId: ID of the product

    Returns:
        Product details
    """
    product_id = require_id("productId", args.product_id)
    return await client.get(f"/products/{product_id}")


async def create_product(client: WooClient, args: CreateProductArgs) -> Any:
    """
    Create a new product.

    Args:
        name: Product name
        type: "simple", "grouped", "external" or "variable"
        regular_price: Regular price as a decimal string
        categories: List of {"id": ...}
        images: List of {"id": ...} or {"src": ...}

    Returns:
        The created product
    """
    require_field("name", args.name)
    return await client.post("/products", args.api_fields())


async def update_product(client: WooClient, args: UpdateProductArgs) -> Any:
    """Update an existing product with the fields in ``data``."""
    product_id = require_id("productId", args.product_id)
    return await client.put(f"/products/{product_id}", args.data)


async def delete_product(client: WooClient, args: DeleteProductArgs) -> Any:
    """Delete a product (force=true by default)."""
    product_id = require_id("productId", args.product_id)
    return await client.delete(f"/products/{product_id}", {"force": args.force})


def register(registry: ToolRegistry) -> None:
    registry.tool("listProducts", Pagination)(list_products)
    registry.tool("getProduct", ProductIdArgs)(get_product)
    registry.tool("createProduct", CreateProductArgs)(create_product)
    registry.tool("updateProduct", UpdateProductArgs)(update_product)
    registry.tool("deleteProduct", DeleteProductArgs)(delete_product)
