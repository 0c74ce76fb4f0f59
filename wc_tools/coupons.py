"""Coupon tools — list, get, create, update, delete coupons."""

from typing import Any, Literal

from pydantic import Field

from .client import WooClient
from .models import MetaData, Pagination, ToolArgs, id_field, require_field, require_id
from .registry import ToolRegistry


class ListCouponsArgs(Pagination):
    code: str | None = Field(default=None, description="Limit result set to coupons with this code")


class CouponIdArgs(ToolArgs):
    coupon_id: int = id_field("couponId")


class CreateCouponArgs(ToolArgs):
    code: str = Field(min_length=1)
    discount_type: Literal["percent", "fixed_cart", "fixed_product"] | None = None
    amount: str | None = None
    description: str | None = None
    date_expires: str | None = None
    individual_use: bool | None = None
    exclude_sale_items: bool | None = None
    minimum_amount: str | None = None
    maximum_amount: str | None = None
    usage_limit: int | None = None
    usage_limit_per_user: int | None = None
    free_shipping: bool | None = None
    product_ids: list[int] | None = None
    excluded_product_ids: list[int] | None = None
    product_categories: list[int] | None = None
    excluded_product_categories: list[int] | None = None
    email_restrictions: list[str] | None = None
    meta_data: list[MetaData] | None = None


class UpdateCouponArgs(CouponIdArgs):
    data: dict[str, Any]


class DeleteCouponArgs(CouponIdArgs):
    force: bool = True


async def list_coupons(client: WooClient, args: ListCouponsArgs) -> Any:
    """
    List coupons (paginated, optionally filtered by code).

    Args:
        per_page: Items per page (default: 10)
        page: Page number (default: 1)
        code: Exact coupon code to look for

    Returns:
        List of coupons as returned by WooCommerce
    """
    return await client.get("/coupons", args.api_fields())


async def get_coupon(client: WooClient, args: CouponIdArgs) -> Any:
    """
    Retrieve a coupon by ID.

    Args:
        couponId: ID of the coupon

    Returns:
        Coupon details
    """
    coupon_id = require_id("couponId", args.coupon_id)
    return await client.get(f"/coupons/{coupon_id}")


async def create_coupon(client: WooClient, args: CreateCouponArgs) -> Any:
    """
    Create a new coupon. ``code`` is mandatory.

    Args:
        code: Coupon code
        discount_type: "percent", "fixed_cart" or "fixed_product"
        amount: Discount amount as a decimal string
        (other fields are passed to WooCommerce as-is)

    Returns:
        The created coupon
    """
    require_field("code", args.code)
    return await client.post("/coupons", args.api_fields())


async def update_coupon(client: WooClient, args: UpdateCouponArgs) -> Any:
    """
    Update an existing coupon.

    Args:
        couponId: ID of the coupon
        data: Fields to change (only these are sent)

    Returns:
        The updated coupon
    """
    coupon_id = require_id("couponId", args.coupon_id)
    return await client.put(f"/coupons/{coupon_id}", args.data)


async def delete_coupon(client: WooClient, args: DeleteCouponArgs) -> Any:
    """
    Delete a coupon. Deletes permanently unless force=false.

    Args:
        couponId: ID of the coupon
        force: Bypass the trash (default: true)

    Returns:
        The deleted coupon
    """
    coupon_id = require_id("couponId", args.coupon_id)
    return await client.delete(f"/coupons/{coupon_id}", {"force": args.force})


def register(registry: ToolRegistry) -> None:
    registry.tool("listCoupons", ListCouponsArgs)(list_coupons)
    registry.tool("getCoupon", CouponIdArgs)(get_coupon)
    registry.tool("createCoupon", CreateCouponArgs)(create_coupon)
    registry.tool("updateCoupon", UpdateCouponArgs)(update_coupon)
    registry.tool("deleteCoupon", DeleteCouponArgs)(delete_coupon)
