"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from wall.domain.model import Feedback, FeedbackWithVotes, Vote
from wall.domain.value import FeedbackId, UserId, VoteId, VoteType


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_feedback(row: Dict[str, Any]) -> Feedback:
    """Convert database row to Feedback domain model.

    Args:
        row: Database row as dict

    Returns:
        Feedback domain model
    """
    return Feedback(
        id=FeedbackId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        created_by=UserId(row["created_by"]),
        created_at=row["created_at"],
    )


def row_to_feedback_with_votes(row: Dict[str, Any]) -> FeedbackWithVotes:
    """Convert a feedback_with_votes view row to the read model.

    Args:
        row: View row as dict

    Returns:
        FeedbackWithVotes without user annotation
    """
    return FeedbackWithVotes(
        id=FeedbackId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        created_by=UserId(row["created_by"]),
        created_at=row["created_at"],
        vote_count=row["vote_count"] or 0,
        upvotes=row["upvotes"] or 0,
        downvotes=row["downvotes"] or 0,
    )


def feedback_to_dict(feedback: Feedback) -> Dict[str, Any]:
    """Convert Feedback to insert values.

    created_at is left to the database clock.
    """
    return {
        "id": feedback.id,
        "title": feedback.title,
        "description": feedback.description,
        "created_by": feedback.created_by,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        feedback_id=FeedbackId(_uuid(row["feedback_id"])),
        user_id=UserId(row["user_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote to insert values.

    created_at is left to the database clock.
    """
    return {
        "id": vote.id,
        "feedback_id": vote.feedback_id,
        "user_id": vote.user_id,
        "vote_type": vote.vote_type.value,
    }
