"""WooCommerce tools package — registers every tool family with a registry."""

from .registry import ToolRegistry

from . import (
    attribute_terms,
    attributes,
    auth,
    categories,
    coupons,
    custom_fields,
    customers,
    order_actions,
    order_notes,
    order_refunds,
    orders,
    products,
    refunds,
    reports,
    reviews,
    shipping_classes,
    tags,
    variations,
)

FAMILIES = (
    auth,
    products,
    variations,
    attributes,
    attribute_terms,
    categories,
    tags,
    shipping_classes,
    reviews,
    custom_fields,
    orders,
    order_actions,
    order_notes,
    order_refunds,
    refunds,
    customers,
    coupons,
    reports,
)


def register_all(registry: ToolRegistry) -> None:
    """Register every tool module with the given registry."""
    for family in FAMILIES:
        family.register(registry)
