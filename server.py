"""MCP Server for WooCommerce — REST API v3 over stdio.

This server provides tools for:
─── Auth ───
 authenticate                     — configure site URL and API keys (call first)

─── Products ───
 listProducts / getProduct / createProduct / updateProduct / deleteProduct
 listProductVariations / getProductVariation / createProductVariation /
   updateProductVariation / deleteProductVariation / batchProductVariations
 listProductAttributes / ... / batchProductAttributes
 listProductAttributeTerms / ... / batchProductAttributeTerms
 listProductCategories / ... / batchProductCategories
 listProductTags / ... / batchProductTags
 listShippingClasses / ... / batchShippingClasses
 listProductReviews / ... / batchProductReviews
 getProductCustomFieldNames

─── Orders ───
 listOrders / getOrder / createOrder / updateOrder / deleteOrder
 sendOrderDetails
 listOrderNotes / getOrderNote / createOrderNote / deleteOrderNote
 listOrderRefunds / getOrderRefund / createOrderRefund / deleteOrderRefund
 listRefunds

─── Customers & Coupons ───
 listCustomers / getCustomer / createCustomer / updateCustomer / deleteCustomer
 listCoupons / getCoupon / createCoupon / updateCoupon / deleteCoupon

─── Reports ───
 listReports / getSalesReport / getTopSellersReport
 get{Coupons,Customers,Orders,Products,Reviews,Categories,Tags,Attributes}Totals

Run the server:
    python server.py        (or the ``woocommerce-mcp`` script)
"""

import asyncio
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from wc_tools import register_all
from wc_tools.config import logger
from wc_tools.registry import ToolRegistry

SERVER_NAME = "woocommerce"


def build_registry() -> ToolRegistry:
    registry = ToolRegistry()
    register_all(registry)
    return registry


def build_server(registry: ToolRegistry) -> Server:
    """Expose ``registry`` through a low-level MCP server.

    Input validation is left to the registry so that bad arguments come back
    as an ``Error in <tool>: ...`` text result like every other failure.
    """
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.list_tools()

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await registry.call(name, arguments)

    return server


async def run() -> None:
    registry = build_registry()
    server = build_server(registry)
    logger.info("Starting WooCommerce MCP server with %d tools", len(registry.tools))
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    asyncio.run(run())


# ── Run ─────────────────────────────────────────
if __name__ == "__main__":
    main()
