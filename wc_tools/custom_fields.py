"""Custom field tools — meta keys used across products."""

from typing import Any

from .client import WooClient
from .models import SortOrder, ViewPagination
from .registry import ToolRegistry


class CustomFieldNamesArgs(ViewPagination):
    search: str | None = None
    order: SortOrder = "desc"


async def get_product_custom_field_names(client: WooClient, args: CustomFieldNamesArgs) -> Any:
    """
    List the custom field (meta) names used by products.

    Args:
        context: "view" or "edit" (default: view)
        page: Page number (default: 1)
        per_page: Items per page (default: 10)
        search: Only names containing this text
        order: "asc" or "desc" (default: desc)

    Returns:
        List of custom field names
    """
    return await client.get("/products/custom-fields/names", args.api_fields())


def register(registry: ToolRegistry) -> None:
    registry.tool("getProductCustomFieldNames", CustomFieldNamesArgs)(get_product_custom_field_names)
