"""Customer tools — list, get, create, update, delete customers."""

from typing import Any, Literal

from pydantic import BaseModel, EmailStr

from .client import WooClient
from .models import MetaData, Pagination, SortOrder, ToolArgs, id_field, require_field, require_id
from .registry import ToolRegistry


class ShippingAddress(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address_1: str | None = None
    address_2: str | None = None
    city: str | None = None
    state: str | None = None
    postcode: str | None = None
    country: str | None = None


class BillingAddress(ShippingAddress):
    email: str | None = None
    phone: str | None = None


class ListCustomersArgs(Pagination):
    search: str | None = None
    exclude: list[int] | None = None
    include: list[int] | None = None
    offset: int | None = None
    order: SortOrder | None = None
    orderby: Literal["id", "include", "name", "registered_date"] | None = None
    email: str | None = None
    role: str | None = None


class CustomerIdArgs(ToolArgs):
    customer_id: int = id_field("customerId")


class CreateCustomerArgs(ToolArgs):
    email: EmailStr
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    password: str | None = None
    billing: BillingAddress | None = None
    shipping: ShippingAddress | None = None
    meta_data: list[MetaData] | None = None


class UpdateCustomerArgs(CustomerIdArgs):
    data: dict[str, Any]


class DeleteCustomerArgs(CustomerIdArgs):
    force: bool = True
    reassign: int | None = None


async def list_customers(client: WooClient, args: ListCustomersArgs) -> Any:
    """
    List customers with filters (page, email, role, ...).

    Args:
        per_page: Items per page (default: 10)
        page: Page number (default: 1)
        search: Free-text search
        email: Exact email address
        role: Customer role (e.g. "customer", "all")

    Returns:
        List of customers
    """
    return await client.get("/customers", args.api_fields())


async def get_customer(client: WooClient, args: CustomerIdArgs) -> Any:
    """Retrieve a customer by ID."""
    customer_id = require_id("customerId", args.customer_id)
    return await client.get(f"/customers/{customer_id}")


async def create_customer(client: WooClient, args: CreateCustomerArgs) -> Any:
    """
    Create a new customer. ``email`` is mandatory.

    Args:
        email: Customer email address
        first_name / last_name / username / password: Optional account data
        billing: Billing address (may include email and phone)
        shipping: Shipping address

    Returns:
        The created customer
    """
    require_field("email", args.email)
    return await client.post("/customers", args.api_fields())


async def update_customer(client: WooClient, args: UpdateCustomerArgs) -> Any:
    """Update an existing customer with the fields in ``data``."""
    customer_id = require_id("customerId", args.customer_id)
    return await client.put(f"/customers/{customer_id}", args.data)


async def delete_customer(client: WooClient, args: DeleteCustomerArgs) -> Any:
    """
    Delete a customer.

    Args:
        customerId: ID of the customer
        force: Must be true, customers do not support trashing (default: true)
        reassign: User ID to reassign the customer's posts to

    Returns:
        The deleted customer
    """
    customer_id = require_id("customerId", args.customer_id)
    params = {"force": args.force, "reassign": args.reassign}
    return await client.delete(f"/customers/{customer_id}", params)


def register(registry: ToolRegistry) -> None:
    registry.tool("listCustomers", ListCustomersArgs)(list_customers)
    registry.tool("getCustomer", CustomerIdArgs)(get_customer)
    registry.tool("createCustomer", CreateCustomerArgs)(create_customer)
    registry.tool("updateCustomer", UpdateCustomerArgs)(update_customer)
    registry.tool("deleteCustomer", DeleteCustomerArgs)(delete_customer)
