"""Order tools — list, get, create, update, delete orders."""

from typing import Any

from pydantic import Field

from .client import WooClient
from .models import MetaData, OpenToolArgs, SortOrder, ToolArgs, id_field, require_id
from .registry import ToolRegistry


class ListOrdersArgs(ToolArgs):
    per_page: int | None = Field(default=None, ge=1)
    page: int | None = Field(default=None, ge=1)
    search: str | None = None
    after: str | None = None
    before: str | None = None
    modified_after: str | None = None
    modified_before: str | None = None
    exclude: list[int] | None = None
    include: list[int] | None = None
    offset: int | None = None
    order: SortOrder | None = None
    orderby: str | None = None
    parent: list[int] | None = None
    parent_exclude: list[int] | None = None
    status: list[str] | None = None
    customer: int | None = None
    product: int | None = None
    dp: int | None = None
    created_via: list[str] | None = None


class OrderIdArgs(ToolArgs):
    order_id: int = id_field("orderId")


class CreateOrderArgs(OpenToolArgs):
    """Full order object; any field WooCommerce accepts is forwarded."""

    status: str | None = None
    currency: str | None = None
    customer_id: int | None = None
    customer_note: str | None = None
    payment_method: str | None = None
    payment_method_title: str | None = None
    set_paid: bool | None = None
    billing: dict[str, Any] | None = None
    shipping: dict[str, Any] | None = None
    line_items: list[dict[str, Any]] | None = None
    shipping_lines: list[dict[str, Any]] | None = None
    fee_lines: list[dict[str, Any]] | None = None
    coupon_lines: list[dict[str, Any]] | None = None
    meta_data: list[MetaData] | None = None


class UpdateOrderArgs(OrderIdArgs):
    data: dict[str, Any]


class DeleteOrderArgs(OrderIdArgs):
    # Orders go to the trash unless asked otherwise, unlike every other family.
    force: bool = False


async def list_orders(client: WooClient, args: ListOrdersArgs) -> Any:
    """
    List orders with filters (page, status, customer, product, dates ...).

    Only the filters you pass are sent; WooCommerce applies its own
    defaults for the rest.

    Returns:
        List of orders
    """
    return await client.get("/orders", args.api_fields())


async def get_order(client: WooClient, args: OrderIdArgs) -> Any:
    """Retrieve an order by ID."""
    order_id = require_id("orderId", args.order_id)
    return await client.get(f"/orders/{order_id}")


async def create_order(client: WooClient, args: CreateOrderArgs) -> Any:
    """
    Create a new order. Pass the complete order object as WooCommerce
    expects it (billing, shipping, line_items, payment_method, ...).

    Returns:
        The created order
    """
    return await client.post("/orders", args.api_fields())


async def update_order(client: WooClient, args: UpdateOrderArgs) -> Any:
    """
    Update an existing order.

    Args:
        orderId: ID of the order
        data: Fields to change (e.g. {"status": "completed"})

    Returns:
        The updated order
    """
    order_id = require_id("orderId", args.order_id)
    return await client.put(f"/orders/{order_id}", args.data)


async def delete_order(client: WooClient, args: DeleteOrderArgs) -> Any:
    """
    Delete an order. Moves it to the trash unless force=true.

    Args:
        orderId: ID of the order
        force: Delete permanently (default: false)

    Returns:
        The deleted order
    """
    order_id = require_id("orderId", args.order_id)
    return await client.delete(f"/orders/{order_id}", {"force": args.force})


def register(registry: ToolRegistry) -> None:
    registry.tool("listOrders", ListOrdersArgs)(list_orders)
    registry.tool("getOrder", OrderIdArgs)(get_order)
    registry.tool("createOrder", CreateOrderArgs)(create_order)
    registry.tool("updateOrder", UpdateOrderArgs)(update_order)
    registry.tool("deleteOrder", DeleteOrderArgs)(delete_order)
