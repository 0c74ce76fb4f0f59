"""Product review tools."""

from typing import Any, Literal

from pydantic import EmailStr, Field

from .client import WooClient
from .models import (
    Context,
    PositiveId,
    SortOrder,
    ToolArgs,
    batch_body,
    dump_items,
    id_field,
    item_id_field,
    require_field,
    require_id,
)
from .registry import ToolRegistry

ReviewStatus = Literal["approved", "hold", "spam", "unspam", "trash", "untrash"]

# Checked in this order so the first one missing is the one reported.
REQUIRED_REVIEW_FIELDS = ("product_id", "review", "reviewer", "reviewer_email", "rating")


class ReviewFields(ToolArgs):
    product_id: int | None = Field(default=None, ge=1)
    review: str | None = None
    reviewer: str | None = None
    reviewer_email: EmailStr | None = None
    rating: int | None = Field(default=None, ge=0, le=5)
    status: ReviewStatus | None = None
    verified: bool | None = None


class ListReviewsArgs(ToolArgs):
    context: Context | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1)
    search: str | None = None
    after: str | None = None
    before: str | None = None
    exclude: list[int] | None = None
    include: list[int] | None = None
    offset: int | None = None
    order: SortOrder | None = None
    orderby: Literal["date", "date_gmt", "id", "slug", "include", "product"] | None = None
    reviewer: list[int] | None = None
    reviewer_exclude: list[int] | None = None
    reviewer_email: list[str] | None = None
    product: list[int] | None = None
    status: Literal["all", "hold", "approved", "spam", "trash"] | None = None


class ReviewIdArgs(ToolArgs):
    review_id: int = id_field("reviewId")


class CreateReviewArgs(ReviewFields):
    pass


class UpdateReviewArgs(ReviewFields):
    review_id: int = id_field("reviewId")


class DeleteReviewArgs(ReviewIdArgs):
    force: bool = True


class ReviewUpdateItem(ReviewFields):
    id: int = item_id_field("reviewId")


class BatchReviewsArgs(ToolArgs):
    create: list[CreateReviewArgs] | None = None
    update: list[ReviewUpdateItem] | None = None
    delete: list[PositiveId] | None = None


def check_new_review(args: ReviewFields) -> None:
    for name in REQUIRED_REVIEW_FIELDS:
        require_field(name, getattr(args, name))


async def list_product_reviews(client: WooClient, args: ListReviewsArgs) -> Any:
    """
    List product reviews.

    Args:
        product: Only reviews of these product IDs
        reviewer_email: Only reviews by these email addresses
        status: "all", "hold", "approved", "spam" or "trash"

    Returns:
        List of reviews
    """
    return await client.get("/products/reviews", args.api_fields())


async def get_product_review(client: WooClient, args: ReviewIdArgs) -> Any:
    """Retrieve a product review by ID."""
    review_id = require_id("reviewId", args.review_id)
    return await client.get(f"/products/reviews/{review_id}")


async def create_product_review(client: WooClient, args: CreateReviewArgs) -> Any:
    """
    Create a product review.

    Args:
        product_id: ID of the reviewed product
        review: Review text
        reviewer: Reviewer name
        reviewer_email: Reviewer email address
        rating: Rating from 0 to 5
        status: Optional moderation status
        verified: Whether the reviewer bought the product

    Returns:
        The created review
    """
    check_new_review(args)
    return await client.post("/products/reviews", args.api_fields())


async def update_product_review(client: WooClient, args: UpdateReviewArgs) -> Any:
    """Update a product review; only the fields provided are sent."""
    review_id = require_id("reviewId", args.review_id)
    return await client.put(f"/products/reviews/{review_id}", args.api_fields("review_id"))


async def delete_product_review(client: WooClient, args: DeleteReviewArgs) -> Any:
    """Delete a product review (force=true by default)."""
    review_id = require_id("reviewId", args.review_id)
    return await client.delete(f"/products/reviews/{review_id}", {"force": args.force})


async def batch_product_reviews(client: WooClient, args: BatchReviewsArgs) -> Any:
    """Create, update and delete reviews in one request."""
    for item in args.create or []:
        check_new_review(item)
    body = batch_body(dump_items(args.create), dump_items(args.update), args.delete)
    return await client.post("/products/reviews/batch", body)


def register(registry: ToolRegistry) -> None:
    registry.tool("listProductReviews", ListReviewsArgs)(list_product_reviews)
    registry.tool("getProductReview", ReviewIdArgs)(get_product_review)
    registry.tool("createProductReview", CreateReviewArgs)(create_product_review)
    registry.tool("updateProductReview", UpdateReviewArgs)(update_product_review)
    registry.tool("deleteProductReview", DeleteReviewArgs)(delete_product_review)
    registry.tool("batchProductReviews", BatchReviewsArgs)(batch_product_reviews)
