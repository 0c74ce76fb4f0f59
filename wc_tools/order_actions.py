"""Order action tools — trigger WooCommerce actions on an order."""

from typing import Any

from .client import WooClient
from .models import ToolArgs, id_field, require_id
from .registry import ToolRegistry


class SendOrderDetailsArgs(ToolArgs):
    order_id: int = id_field("orderId")


async def send_order_details(client: WooClient, args: SendOrderDetailsArgs) -> Any:
    """
    Email the order details to the customer.

    Args:
        orderId: ID of the order

    Returns:
        WooCommerce confirmation message
    """
    order_id = require_id("orderId", args.order_id)
    return await client.post(f"/orders/{order_id}/actions/send_order_details")


def register(registry: ToolRegistry) -> None:
    registry.tool("sendOrderDetails", SendOrderDetailsArgs)(send_order_details)
