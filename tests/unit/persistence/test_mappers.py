"""Unit tests for row mappers."""

from uuid import uuid4

from wall.domain.value import VoteType
from wall.persistence.mappers import (
    feedback_to_dict,
    row_to_feedback_with_votes,
    row_to_vote,
    vote_to_dict,
)
from tests.conftest import BASE_TIME, make_feedback, make_vote


class TestMappers:
    """Tests for row and insert value mapping."""

    def test_view_row_null_counts_become_zero(self):
        """Aggregates missing from the view row count as zero."""
        row = {
            "id": str(uuid4()),
            "title": "Dark mode",
            "description": None,
            "created_by": "alice",
            "created_at": BASE_TIME,
            "vote_count": None,
            "upvotes": None,
            "downvotes": None,
        }

        item = row_to_feedback_with_votes(row)

        assert (item.vote_count, item.upvotes, item.downvotes) == (0, 0, 0)
        assert item.user_vote is None

    def test_vote_row_parses_enum(self):
        """vote_type strings become VoteType."""
        vote = make_vote(make_feedback().id, "alice", VoteType.DOWN)
        row = {**vote_to_dict(vote), "created_at": BASE_TIME}

        assert row_to_vote(row).vote_type is VoteType.DOWN
        assert row["vote_type"] == "down"

    def test_insert_values_leave_created_at_to_database(self):
        """created_at is never sent on insert."""
        assert "created_at" not in feedback_to_dict(make_feedback())
