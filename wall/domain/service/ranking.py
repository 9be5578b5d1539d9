"""Display ordering for feedback items."""

from typing import Iterable

from wall.domain.model import FeedbackWithVotes


def ranking_key(item: FeedbackWithVotes) -> tuple[int, float, str]:
    """Sort key: net votes desc, then newest first, then id.

    The id component makes the order total, so the result never depends on
    the order rows arrived in.
    """
    return (-item.vote_count, -item.created_at.timestamp(), str(item.id))


def rank_feedback(items: Iterable[FeedbackWithVotes]) -> list[FeedbackWithVotes]:
    """Return items in display order without modifying the input."""
    return sorted(items, key=ranking_key)
