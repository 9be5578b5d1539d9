#!/usr/bin/env python3
"""Mount the live feedback list and print every ranked snapshot.

Usage:
    python scripts/watch_feedback.py [--voter USER_ID] [--chart]

Runs until interrupted. Votes and submissions made anywhere else show up
as soon as the database announces them.
"""

import argparse
import asyncio
import sys

import logfire

from wall.application.live import FeedbackView, VoteChartView
from wall.config import Settings
from wall.domain.model import FeedbackSnapshot, VoteChartSnapshot
from wall.domain.value import UserId
from wall.util.di.container import create_container
from wall.util.logging import get_logger, setup_logging
from wall.util.observability import configure_logfire

logger = get_logger("wall.scripts.watch_feedback")

VOTE_MARKS = {None: " ", "up": "+", "down": "-"}


def print_feedback(snapshot: FeedbackSnapshot) -> None:
    if not snapshot.ok:
        print(f"[{snapshot.fetched_at:%H:%M:%S}] error: {snapshot.error}")
        return
    print(f"[{snapshot.fetched_at:%H:%M:%S}] {len(snapshot.items)} items")
    for item in snapshot.items:
        mark = VOTE_MARKS[item.user_vote.value if item.user_vote else None]
        print(
            f"  {mark} {item.vote_count:>4} "
            f"(+{item.upvotes}/-{item.downvotes})  {item.title}"
        )


def print_chart(snapshot: VoteChartSnapshot) -> None:
    if not snapshot.ok:
        print(f"[{snapshot.fetched_at:%H:%M:%S}] chart error: {snapshot.error}")
        return
    for bar in snapshot.bars:
        print(f"  {bar.label:<15} {'#' * bar.votes} {bar.votes}")


async def watch(voter: UserId | None, chart: bool) -> None:
    container = create_container()
    try:
        async with container() as scope:
            view = await scope.get(FeedbackView)
            view.on_change = print_feedback
            await view.set_voter(voter)

            if chart:
                chart_view = await scope.get(VoteChartView)
                chart_view.on_change = print_chart
                async with view, chart_view:
                    await asyncio.Event().wait()
            else:
                async with view:
                    await asyncio.Event().wait()
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--voter", help="User id to annotate own votes for")
    parser.add_argument("--chart", action="store_true", help="Also show the chart")
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    voter = UserId(args.voter) if args.voter else None
    logger.info("Watching feedback as %s", voter or "anonymous")
    try:
        asyncio.run(watch(voter, args.chart))
    except KeyboardInterrupt:
        logfire.info("Watcher stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
