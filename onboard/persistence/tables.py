"""SQLAlchemy table definitions for onboard.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Boolean, Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("email_verified", Boolean, nullable=False, server_default="false"),
    Column("password_hash", Text, nullable=True),  # NULL until first password set
    Column("password_changed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_accounts_email", accounts_table.c.email)
