"""Test configuration and fixtures."""

import asyncio
from datetime import datetime, timedelta
from typing import Callable
from uuid import uuid4

from wall.domain.model import Feedback, FeedbackWithVotes, Vote
from wall.domain.value import FeedbackId, UserId, VoteId, VoteType

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_feedback(
    title: str = "Dark mode",
    minutes: int = 0,
    created_by: str = "author",
) -> Feedback:
    """Helper to build a feedback item created ``minutes`` after BASE_TIME."""
    return Feedback(
        id=FeedbackId(uuid4()),
        title=title,
        description=None,
        created_by=UserId(created_by),
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def make_row(
    title: str = "Dark mode",
    up: int = 0,
    down: int = 0,
    minutes: int = 0,
) -> FeedbackWithVotes:
    """Helper to build an aggregated feedback row with a consistent net count."""
    feedback = make_feedback(title=title, minutes=minutes)
    return FeedbackWithVotes(
        **feedback.model_dump(),
        vote_count=up - down,
        upvotes=up,
        downvotes=down,
    )


def make_vote(feedback_id: FeedbackId, user_id: str, vote_type: VoteType) -> Vote:
    """Helper to build a vote."""
    return Vote(
        id=VoteId(uuid4()),
        feedback_id=feedback_id,
        user_id=UserId(user_id),
        vote_type=vote_type,
    )


async def eventually(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    """Wait until background tasks make ``predicate`` true.

    Raises:
        asyncio.TimeoutError: If it does not become true in time
    """

    async def _wait() -> None:
        while not predicate():
            await asyncio.sleep(0.005)

    await asyncio.wait_for(_wait(), timeout)


async def settle(seconds: float = 0.05) -> None:
    """Give background tasks time to react to anything pending."""
    await asyncio.sleep(seconds)
