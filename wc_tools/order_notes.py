"""Order note tools — list, get, create, delete notes on an order."""

from typing import Any, Literal

from pydantic import Field

from wc_shared.constants import DEFAULT_CONTEXT

from .client import WooClient
from .models import Context, ToolArgs, id_field, require_field, require_id
from .registry import ToolRegistry


class OrderScopedArgs(ToolArgs):
    order_id: int = id_field("orderId")


class ListOrderNotesArgs(OrderScopedArgs):
    context: Context = DEFAULT_CONTEXT
    type: Literal["any", "customer", "internal"] = "any"


class OrderNoteIdArgs(OrderScopedArgs):
    note_id: int = id_field("noteId")


class CreateOrderNoteArgs(OrderScopedArgs):
    note: str = Field(min_length=1)
    customer_note: bool = False
    added_by_user: bool = False


class DeleteOrderNoteArgs(OrderNoteIdArgs):
    force: bool = True


async def list_order_notes(client: WooClient, args: ListOrderNotesArgs) -> Any:
    """
    List the notes of an order.

    Args:
        orderId: ID of the order
        context: "view" or "edit" (default: view)
        type: "any", "customer" or "internal" (default: any)

    Returns:
        List of order notes
    """
    order_id = require_id("orderId", args.order_id)
    return await client.get(f"/orders/{order_id}/notes", args.api_fields("order_id"))


async def get_order_note(client: WooClient, args: OrderNoteIdArgs) -> Any:
    """Retrieve a single note of an order."""
    order_id = require_id("orderId", args.order_id)
    note_id = require_id("noteId", args.note_id)
    return await client.get(f"/orders/{order_id}/notes/{note_id}")


async def create_order_note(client: WooClient, args: CreateOrderNoteArgs) -> Any:
    """
    Add a note to an existing order.

    Args:
        orderId: ID of the order
        note: Note text
        customer_note: Show the note to the customer and email it (default: false)
        added_by_user: Attribute the note to the current user (default: false)

    Returns:
        The created note
    """
    order_id = require_id("orderId", args.order_id)
    require_field("note", args.note)
    return await client.post(f"/orders/{order_id}/notes", args.api_fields("order_id"))


async def delete_order_note(client: WooClient, args: DeleteOrderNoteArgs) -> Any:
    """Delete a note from an order (force defaults to true)."""
    order_id = require_id("orderId", args.order_id)
    note_id = require_id("noteId", args.note_id)
    return await client.delete(f"/orders/{order_id}/notes/{note_id}", {"force": args.force})


def register(registry: ToolRegistry) -> None:
    registry.tool("listOrderNotes", ListOrderNotesArgs)(list_order_notes)
    registry.tool("getOrderNote", OrderNoteIdArgs)(get_order_note)
    registry.tool("createOrderNote", CreateOrderNoteArgs)(create_order_note)
    registry.tool("deleteOrderNote", DeleteOrderNoteArgs)(delete_order_note)
