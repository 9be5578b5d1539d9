"""initial_schema

Create the schema for the feedback wall:
- Feedback (title, optional description, submitted by an external user id)
- Votes (up or down, one per user per feedback item)
- feedback_with_votes view (net count, upvotes, downvotes per item)
- NOTIFY triggers announcing every row change on feedback and votes

Revision ID: 3f1c2a9d7b04
Revises:
Create Date: 2025-11-02 10:14:52.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13, pgcrypto covers older servers
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_type AS ENUM ('up', 'down');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # FEEDBACK table
    # ========================================================================
    op.create_table(
        "feedback",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(btrim(title)) > 0", name="ck_feedback_title"),
    )
    op.create_index(
        "idx_feedback_created_at", "feedback", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # VOTES table (one vote per user per feedback item)
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("feedback_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM("up", "down", name="vote_type", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["feedback_id"], ["feedback.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("feedback_id", "user_id", name="unique_vote"),
    )
    op.create_index("idx_votes_user_id", "votes", ["user_id"])

    # ========================================================================
    # FEEDBACK_WITH_VOTES view
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE VIEW feedback_with_votes AS
        SELECT
            f.id,
            f.title,
            f.description,
            f.created_by,
            f.created_at,
            COALESCE(SUM(CASE WHEN v.vote_type = 'up' THEN 1
                              WHEN v.vote_type = 'down' THEN -1
                              ELSE 0 END), 0)::integer AS vote_count,
            COUNT(*) FILTER (WHERE v.vote_type = 'up')::integer AS upvotes,
            COUNT(*) FILTER (WHERE v.vote_type = 'down')::integer AS downvotes
        FROM feedback f
        LEFT JOIN votes v ON v.feedback_id = f.id
        GROUP BY f.id
    """)

    # ========================================================================
    # Change notifications: pg_notify('<table>_changes', {"table", "op"})
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION notify_row_change()
        RETURNS TRIGGER AS $$
        BEGIN
            PERFORM pg_notify(
                TG_TABLE_NAME || '_changes',
                json_build_object('table', TG_TABLE_NAME, 'op', TG_OP)::text
            );
            RETURN NULL;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER notify_feedback_changes
        AFTER INSERT OR UPDATE OR DELETE ON feedback
        FOR EACH ROW EXECUTE FUNCTION notify_row_change()
    """)

    op.execute("""
        CREATE TRIGGER notify_votes_changes
        AFTER INSERT OR UPDATE OR DELETE ON votes
        FOR EACH ROW EXECUTE FUNCTION notify_row_change()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop triggers
    op.execute("DROP TRIGGER IF EXISTS notify_votes_changes ON votes")
    op.execute("DROP TRIGGER IF EXISTS notify_feedback_changes ON feedback")

    # Drop trigger functions
    op.execute("DROP FUNCTION IF EXISTS notify_row_change()")

    # Drop views
    op.execute("DROP VIEW IF EXISTS feedback_with_votes")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("votes")
    op.drop_table("feedback")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS vote_type")
