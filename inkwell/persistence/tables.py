"""SQLAlchemy table definitions for Inkwell.

PostgreSQL serves as a document store: each comment row holds its replies
as an embedded JSONB array. The definitions match the schema created by the
Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (replies embedded as an ordered JSONB array)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("post_id", UUID, nullable=False),
    Column("author", JSONB, nullable=False),  # {name, email, photo_ref}
    Column("text", Text, nullable=False),
    Column("replies", JSONB, nullable=False, server_default="[]"),
    # Bumped on every write to replies, checked by whole-array rewrites
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("version >= 0", name="check_comment_version_non_negative"),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.created_at)

# ============================================================================
# PAYMENT TRANSACTIONS TABLE
# ============================================================================
payment_transactions_table = Table(
    "payment_transactions",
    metadata,
    Column("id", UUID, primary_key=True),  # Generated locally before checkout
    Column("customer", JSONB, nullable=False),  # {name, email, phone}
    Column("customer_email", String(254), nullable=False),  # Denormalized for lookup
    Column("amount", Numeric(12, 2), nullable=False),
    Column("currency", String(3), nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("gateway_session", String(255), nullable=True),
    Column("validation_id", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("paid_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("amount > 0", name="check_transaction_amount_positive"),
    CheckConstraint(
        "status IN ('pending', 'paid')", name="check_transaction_status_valid"
    ),
)

Index(
    "idx_payment_transactions_customer_email",
    payment_transactions_table.c.customer_email,
    payment_transactions_table.c.created_at,
)
