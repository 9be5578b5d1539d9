"""SQLAlchemy table definitions for the feedback wall.

They match the schema defined in Alembic migrations. Users live in the
external auth provider, so user references are plain strings without
foreign keys.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ENUM, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# Read-only views, kept apart so create_all never tries to create them
views_metadata = MetaData()

vote_type_enum = ENUM("up", "down", name="vote_type", create_type=False)

# ============================================================================
# FEEDBACK TABLE
# ============================================================================
feedback_table = Table(
    "feedback",
    metadata,
    Column(
        "id",
        UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    ),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("created_by", String(255), nullable=False),  # Auth provider user id
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_feedback_created_at", feedback_table.c.created_at)

# ============================================================================
# VOTES TABLE (one vote per user per feedback item)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "id",
        UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    ),
    Column(
        "feedback_id",
        UUID(as_uuid=True),
        ForeignKey("feedback.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(255), nullable=False),
    Column("vote_type", vote_type_enum, nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("feedback_id", "user_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)

# ============================================================================
# FEEDBACK_WITH_VOTES VIEW (pre-aggregated vote totals)
# ============================================================================
feedback_with_votes_view = Table(
    "feedback_with_votes",
    views_metadata,
    Column("id", UUID(as_uuid=True)),
    Column("title", String(200)),
    Column("description", Text),
    Column("created_by", String(255)),
    Column("created_at", TIMESTAMP(timezone=True)),
    Column("vote_count", Integer),
    Column("upvotes", Integer),
    Column("downvotes", Integer),
)
