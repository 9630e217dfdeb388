"""initial_schema

Create the document-style schema for Inkwell:
- Comments (replies embedded as an ordered JSONB array, version counter)
- Payment transactions (keyed by the locally generated transaction id)

Revision ID: 3f2c9d41a7b0
Revises:
Create Date: 2026-10-19 10:12:44.201533

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9d41a7b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(), nullable=False),
        sa.Column("post_id", postgresql.UUID(), nullable=False),
        sa.Column("author", postgresql.JSONB(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "replies",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("version >= 0", name="check_comment_version_non_negative"),
        sa.CheckConstraint(
            "jsonb_typeof(replies) = 'array'", name="check_comment_replies_array"
        ),
    )
    op.create_index(
        "idx_comments_post_id", "comments", ["post_id", "created_at"], unique=False
    )

    op.create_table(
        "payment_transactions",
        sa.Column("id", postgresql.UUID(), nullable=False),
        sa.Column("customer", postgresql.JSONB(), nullable=False),
        sa.Column("customer_email", sa.String(length=254), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column(
            "status", sa.String(length=20), nullable=False, server_default="pending"
        ),
        sa.Column("gateway_session", sa.String(length=255), nullable=True),
        sa.Column("validation_id", sa.String(length=255), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("paid_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("amount > 0", name="check_transaction_amount_positive"),
        sa.CheckConstraint(
            "status IN ('pending', 'paid')", name="check_transaction_status_valid"
        ),
    )
    op.create_index(
        "idx_payment_transactions_customer_email",
        "payment_transactions",
        ["customer_email", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "idx_payment_transactions_customer_email", table_name="payment_transactions"
    )
    op.drop_table("payment_transactions")
    op.drop_index("idx_comments_post_id", table_name="comments")
    op.drop_table("comments")
