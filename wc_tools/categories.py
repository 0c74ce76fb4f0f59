"""Product category tools."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

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

Display = Literal["default", "products", "subcategories", "both"]


class CategoryImage(BaseModel):
    """Either an existing media ``id`` or a ``src`` URL to sideload."""

    id: int | None = None
    src: str | None = None

    @model_validator(mode="after")
    def _one_reference(self) -> "CategoryImage":
        if self.id is None and not self.src:
            raise ValueError("image needs an id or a src")
        return self


class CategoryFields(ToolArgs):
    slug: str | None = None
    parent: int | None = None
    description: str | None = None
    display: Display | None = None
    image: CategoryImage | None = None
    menu_order: int | None = None


class ListCategoriesArgs(ToolArgs):
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
    slug: str | None = None


class CategoryIdArgs(ToolArgs):
    category_id: int = id_field("categoryId")


class CreateCategoryArgs(CategoryFields):
    name: str = Field(min_length=1)


class UpdateCategoryArgs(CategoryFields):
    category_id: int = id_field("categoryId")
    name: str | None = None


class DeleteCategoryArgs(CategoryIdArgs):
    force: bool = True


class CategoryUpdateItem(CategoryFields):
    id: int = item_id_field("categoryId")
    name: str | None = None


class BatchCategoriesArgs(ToolArgs):
    create: list[CreateCategoryArgs] | None = None
    update: list[CategoryUpdateItem] | None = None
    delete: list[PositiveId] | None = None


async def list_product_categories(client: WooClient, args: ListCategoriesArgs) -> Any:
    """
    List product categories. Only the filters you pass are sent.

    Args:
        search: Free-text search
        parent: Only children of this category
        hide_empty: Skip categories without products

    Returns:
        List of categories
    """
    return await client.get("/products/categories", args.api_fields())


async def get_product_category(client: WooClient, args: CategoryIdArgs) -> Any:
    """Retrieve a product category by ID."""
    category_id = require_id("categoryId", args.category_id)
    return await client.get(f"/products/categories/{category_id}")


async def create_product_category(client: WooClient, args: CreateCategoryArgs) -> Any:
    """
    Create a product category. ``name`` is mandatory.

    Args:
        name: Category name
        parent: Parent category ID
        display: "default", "products", "subcategories" or "both"
        image: {"id": media id} or {"src": image URL}

    Returns:
        The created category
    """
    require_field("name", args.name)
    return await client.post("/products/categories", args.api_fields())


async def update_product_category(client: WooClient, args: UpdateCategoryArgs) -> Any:
    """Update a product category; only the fields provided are sent."""
    category_id = require_id("categoryId", args.category_id)
    return await client.put(f"/products/categories/{category_id}", args.api_fields("category_id"))


async def delete_product_category(client: WooClient, args: DeleteCategoryArgs) -> Any:
    """Delete a product category (force=true by default)."""
    category_id = require_id("categoryId", args.category_id)
    return await client.delete(f"/products/categories/{category_id}", {"force": args.force})


async def batch_product_categories(client: WooClient, args: BatchCategoriesArgs) -> Any:
    """
    Create, update and delete categories in one request.

    Update items name the category with ``id`` (or ``categoryId``).
    """
    body = batch_body(dump_items(args.create), dump_items(args.update), args.delete)
    return await client.post("/products/categories/batch", body)


def register(registry: ToolRegistry) -> None:
    registry.tool("listProductCategories", ListCategoriesArgs)(list_product_categories)
    registry.tool("getProductCategory", CategoryIdArgs)(get_product_category)
    registry.tool("createProductCategory", CreateCategoryArgs)(create_product_category)
    registry.tool("updateProductCategory", UpdateCategoryArgs)(update_product_category)
    registry.tool("deleteProductCategory", DeleteCategoryArgs)(delete_product_category)
    registry.tool("batchProductCategories", BatchCategoriesArgs)(batch_product_categories)
