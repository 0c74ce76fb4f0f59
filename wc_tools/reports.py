"""Report tools — sales, top sellers and per-resource totals."""

from typing import Any, Literal

from .client import WooClient
from .models import Context, ToolArgs
from .registry import ToolRegistry

# tool name -> resource whose totals endpoint it reads
TOTALS_REPORTS = {
    "getCouponsTotals": "coupons",
    "getCustomersTotals": "customers",
    "getOrdersTotals": "orders",
    "getProductsTotals": "products",
    "getReviewsTotals": "reviews",
    "getCategoriesTotals": "categories",
    "getTagsTotals": "tags",
    "getAttributesTotals": "attributes",
}


class NoArgs(ToolArgs):
    pass


class ReportPeriodArgs(ToolArgs):
    context: Context | None = None
    period: Literal["week", "month", "last_month", "year"] | None = None
    date_min: str | None = None
    date_max: str | None = None


async def list_reports(client: WooClient, args: NoArgs) -> Any:
    """List the reports available on the store."""
    return await client.get("/reports")


async def get_sales_report(client: WooClient, args: ReportPeriodArgs) -> Any:
    """
    Retrieve the sales report.

    Args:
        period: "week", "month", "last_month" or "year"
        date_min: Start date (YYYY-MM-DD), used instead of period
        date_max: End date (YYYY-MM-DD)

    Returns:
        Sales totals for the period
    """
    return await client.get("/reports/sales", args.api_fields())


async def get_top_sellers_report(client: WooClient, args: ReportPeriodArgs) -> Any:
    """Retrieve the top sellers report (same period filters as the sales report)."""
    return await client.get("/reports/top_sellers", args.api_fields())


def totals_report(resource: str):
    async def get_totals(client: WooClient, args: NoArgs) -> Any:
        return await client.get(f"/reports/{resource}/totals")

    get_totals.__name__ = f"get_{resource}_totals"
    return get_totals


def register(registry: ToolRegistry) -> None:
    registry.tool("listReports", NoArgs)(list_reports)
    registry.tool("getSalesReport", ReportPeriodArgs)(get_sales_report)
    registry.tool("getTopSellersReport", ReportPeriodArgs)(get_top_sellers_report)
    for name, resource in TOTALS_REPORTS.items():
        registry.tool(name, NoArgs, description=f"Retrieve the {resource} totals report.")(totals_report(resource))
