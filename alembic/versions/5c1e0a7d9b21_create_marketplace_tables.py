"""create marketplace tables

Revision ID: 5c1e0a7d9b21
Revises:
Create Date: 2026-10-18 10:12:40.118240

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1e0a7d9b21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


listing_type = sa.Enum("rent", "sell", name="listingtype")
book_condition = sa.Enum("new", "excellent", "good", "fair", name="bookcondition")
delivery_option = sa.Enum("pickup", "delivery", "both", name="deliveryoption")
transaction_type = sa.Enum("rent", "purchase", name="transactiontype")
transaction_status = sa.Enum(
    "pending", "paid", "active", "completed", "cancelled", "refunded",
    name="transactionstatus",
)
review_type = sa.Enum("book", "user", "transaction", name="reviewtype")
premium_plan = sa.Enum("monthly", "quarterly", "annual", name="premiumplan")
subscription_status = sa.Enum("active", "expired", "cancelled", name="subscriptionstatus")


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("city", sa.String(), nullable=False),
        sa.Column("pincode", sa.String(), nullable=False),
        sa.Column("college", sa.String(), nullable=True),
        sa.Column("interests", sa.JSON(), nullable=True),
        sa.Column("is_premium", sa.Boolean(), nullable=False),
        sa.Column("premium_plan", sa.JSON(), nullable=True),
        sa.Column("wallet_balance", sa.Float(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("total_ratings", sa.Integer(), nullable=False),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "book",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("author", sa.String(), nullable=False),
        sa.Column("isbn", sa.String(), nullable=True),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("language", sa.String(), nullable=False),
        sa.Column("publisher", sa.String(), nullable=False),
        sa.Column("publish_year", sa.Integer(), nullable=False),
        sa.Column("edition", sa.String(), nullable=True),
        sa.Column("pages", sa.Integer(), nullable=True),
        sa.Column("mrp", sa.Float(), nullable=False),
        sa.Column("selling_price", sa.Float(), nullable=False),
        sa.Column("listing_type", listing_type, nullable=False),
        sa.Column("condition", book_condition, nullable=False),
        sa.Column("condition_notes", sa.String(), nullable=True),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("highlights", sa.String(), nullable=True),
        sa.Column("images", sa.JSON(), nullable=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("location", sa.JSON(), nullable=True),
        sa.Column("delivery_options", delivery_option, nullable=True),
        sa.Column("availability", sa.JSON(), nullable=True),
        sa.Column("rentals", sa.JSON(), nullable=True),
        sa.Column("reviews", sa.JSON(), nullable=True),
        sa.Column("average_rating", sa.Float(), nullable=False),
        sa.Column("total_reviews", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False),
    )
    op.create_index("ix_book_category", "book", ["category"])
    op.create_index("ix_book_owner_id", "book", ["owner_id"])

    op.create_table(
        "transaction",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("book_id", sa.Integer(), sa.ForeignKey("book.id"), nullable=False),
        sa.Column("seller_id", sa.Integer(), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("buyer_id", sa.Integer(), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("transaction_type", transaction_type, nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("advance_amount", sa.Float(), nullable=True),
        sa.Column("monthly_rental", sa.Float(), nullable=True),
        sa.Column("rental_duration", sa.Integer(), nullable=True),
        sa.Column("status", transaction_status, nullable=False),
        sa.Column("payment_details", sa.JSON(), nullable=True),
        sa.Column("rental", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_transaction_book_id", "transaction", ["book_id"])
    op.create_index("ix_transaction_seller_id", "transaction", ["seller_id"])
    op.create_index("ix_transaction_buyer_id", "transaction", ["buyer_id"])

    op.create_table(
        "review",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("type", review_type, nullable=False),
        sa.Column("book_id", sa.Integer(), sa.ForeignKey("book.id"), nullable=True),
        sa.Column("transaction_id", sa.Integer(), sa.ForeignKey("transaction.id"), nullable=True),
        sa.Column("reviewee_id", sa.Integer(), sa.ForeignKey("user.id"), nullable=True),
        sa.Column("reviewer_id", sa.Integer(), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.String(), nullable=False),
        sa.Column("helpful", sa.Integer(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_review_book_id", "review", ["book_id"])

    op.create_table(
        "subscription",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("plan", premium_plan, nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", subscription_status, nullable=False),
        sa.Column("benefits", sa.JSON(), nullable=True),
        sa.Column("payment_details", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_subscription_user_id", "subscription", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_subscription_user_id", table_name="subscription")
    op.drop_table("subscription")
    op.drop_index("ix_review_book_id", table_name="review")
    op.drop_table("review")
    op.drop_index("ix_transaction_buyer_id", table_name="transaction")
    op.drop_index("ix_transaction_seller_id", table_name="transaction")
    op.drop_index("ix_transaction_book_id", table_name="transaction")
    op.drop_table("transaction")
    op.drop_index("ix_book_owner_id", table_name="book")
    op.drop_index("ix_book_category", table_name="book")
    op.drop_table("book")
    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")

    for enum in (
        subscription_status, premium_plan, review_type, transaction_status,
        transaction_type, delivery_option, book_condition, listing_type,
    ):
        enum.drop(op.get_bind(), checkfirst=True)
