"""Order refund tools — list, get, create, delete refunds of an order."""

from typing import Any

from pydantic import BaseModel, Field

from wc_shared.constants import DEFAULT_CONTEXT, DEFAULT_PAGE, DEFAULT_PER_PAGE

from .client import WooClient
from .models import Context, MetaData, ToolArgs, id_field, require_id
from .registry import ToolRegistry


class RefundTax(BaseModel):
    id: int = Field(ge=1)
    refund_total: float


class RefundLineItem(BaseModel):
    id: int = Field(ge=1)
    refund_total: float
    refund_tax: list[RefundTax] | None = None


class OrderScopedArgs(ToolArgs):
    order_id: int = id_field("orderId")


class ListOrderRefundsArgs(OrderScopedArgs):
    context: Context = DEFAULT_CONTEXT
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1)


class OrderRefundIdArgs(OrderScopedArgs):
    refund_id: int = id_field("refundId")


class CreateOrderRefundArgs(OrderScopedArgs):
    amount: str | None = None
    reason: str | None = None
    api_refund: bool = True
    api_restock: bool = True
    line_items: list[RefundLineItem] | None = None
    meta_data: list[MetaData] | None = None


class DeleteOrderRefundArgs(OrderRefundIdArgs):
    force: bool = True


async def list_order_refunds(client: WooClient, args: ListOrderRefundsArgs) -> Any:
    """List the refunds of an order (context=view, page=1, per_page=10 by default)."""
    order_id = require_id("orderId", args.order_id)
    return await client.get(f"/orders/{order_id}/refunds", args.api_fields("order_id"))


async def get_order_refund(client: WooClient, args: OrderRefundIdArgs) -> Any:
    """Retrieve a single refund of an order."""
    order_id = require_id("orderId", args.order_id)
    refund_id = require_id("refundId", args.refund_id)
    return await client.get(f"/orders/{order_id}/refunds/{refund_id}")


async def create_order_refund(client: WooClient, args: CreateOrderRefundArgs) -> Any:
    """
    Create a refund for an existing order.

    Args:
        orderId: ID of the order
        amount: Amount to refund as a decimal string
        reason: Reason shown on the order
        api_refund: Refund through the payment gateway (default: true)
        api_restock: Restock refunded items (default: true)
        line_items: Items to refund, each with id, refund_total and optional refund_tax

    Returns:
        The created refund
    """
    order_id = require_id("orderId", args.order_id)
    return await client.post(f"/orders/{order_id}/refunds", args.api_fields("order_id"))


async def delete_order_refund(client: WooClient, args: DeleteOrderRefundArgs) -> Any:
    """Delete a refund of an order (force defaults to true)."""
    order_id = require_id("orderId", args.order_id)
    refund_id = require_id("refundId", args.refund_id)
    return await client.delete(f"/orders/{order_id}/refunds/{refund_id}", {"force": args.force})


def register(registry: ToolRegistry) -> None:
    registry.tool("listOrderRefunds", ListOrderRefundsArgs)(list_order_refunds)
    registry.tool("getOrderRefund", OrderRefundIdArgs)(get_order_refund)
    registry.tool("createOrderRefund", CreateOrderRefundArgs)(create_order_refund)
    registry.tool("deleteOrderRefund", DeleteOrderRefundArgs)(delete_order_refund)
