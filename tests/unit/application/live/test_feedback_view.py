"""Unit tests for the live FeedbackView."""

import asyncio

import pytest

from wall.adapter.error import ProviderError, SubscriptionError
from wall.adapter.realtime import InMemoryChangeFeed
from wall.application.live import FeedbackView, LiveView, ReconcilerState
from wall.config import RealtimeSettings
from wall.domain.repository import FeedbackRepository, VoteRepository
from wall.domain.value import ChangeEvent, Collection, UserId, VoteAction, VoteType
from wall.persistence.repository.inmemory import InMemoryStore
from tests.conftest import eventually, make_feedback, make_vote, settle
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class GatedView(LiveView[int]):
    """View whose loads block until released."""

    name = "gated"

    def __init__(self, change_feed, settings):
        super().__init__(change_feed, settings)
        self.gate = asyncio.Event()
        self.loads = 0
        self.seen: list[int] = []
        self.on_change = self.seen.append

    async def load(self) -> int:
        self.loads += 1
        await self.gate.wait()
        return self.loads


class TestMount:
    """Tests for mounting and unmounting."""

    @pytest.mark.asyncio
    async def test_mount_loads_initial_snapshot(self, unit_env):
        """Entering the view subscribes and loads the ranked list."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        feed = await unit_env.get(InMemoryChangeFeed)
        feedback_repo = await unit_env.get(FeedbackRepository)
        await feedback_repo.save(make_feedback("Older", minutes=1))
        await feedback_repo.save(make_feedback("Newer", minutes=2))
        assert view.loading

        # Act
        async with view:
            # Assert
            assert view.state is ReconcilerState.SUBSCRIBED
            assert not view.loading
            assert [item.title for item in view.snapshot.items] == ["Newer", "Older"]
            assert len(feed.subscriptions) == 2

        assert view.state is ReconcilerState.TORN_DOWN
        assert feed.subscriptions == []

    @pytest.mark.asyncio
    async def test_failed_mount_releases_everything(self, unit_env):
        """If subscribing fails, the view is unmounted and the error raised."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        feed = await unit_env.get(InMemoryChangeFeed)
        feed.fail_subscribe_for.add(Collection.VOTES)

        # Act & Assert
        with pytest.raises(SubscriptionError):
            async with view:
                pass
        assert view.state is ReconcilerState.TORN_DOWN
        assert feed.subscriptions == []
        assert view.snapshot is None

    @pytest.mark.asyncio
    async def test_late_notification_after_unmount_changes_nothing(self, unit_env):
        """After unmount a delayed delivery neither refreshes nor mutates state."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        feedback_repo = await unit_env.get(FeedbackRepository)
        await feedback_repo.save(make_feedback())
        seen = []
        view.on_change = seen.append
        async with view:
            subscriptions = view.reconciler.subscriptions
        final_snapshot = view.snapshot
        refreshes = view.reconciler.refresh_count

        # Act
        await feedback_repo.save(make_feedback("Arrives late"))
        for subscription in subscriptions:
            subscription.deliver(ChangeEvent.INSERT)
        await settle()

        # Assert
        assert view.snapshot is final_snapshot
        assert view.reconciler.refresh_count == refreshes
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_mount_returns_with_latest_snapshot(self):
        """Mount waits for a refresh and the follow-up queued behind it."""
        # Arrange
        feed = InMemoryChangeFeed()
        view = GatedView(feed, RealtimeSettings(poll_interval=None))
        mounting = asyncio.create_task(view.mount())
        await eventually(lambda: view.loads == 1)
        feed.emit(Collection.FEEDBACK, ChangeEvent.INSERT)
        await settle()
        assert not mounting.done()

        # Act
        view.gate.set()
        await asyncio.wait_for(mounting, 1.0)

        # Assert
        assert not view.loading
        assert view.snapshot == 2
        await view.unmount()

    @pytest.mark.asyncio
    async def test_in_flight_refresh_dropped_after_unmount(self):
        """A load that finishes after unmount is not applied."""
        # Arrange
        view = GatedView(InMemoryChangeFeed(), RealtimeSettings(poll_interval=None))
        mounting = asyncio.create_task(view.mount())
        await eventually(lambda: view.loads == 1)

        # Act
        await view.unmount()
        view.gate.set()
        await mounting

        # Assert
        assert view.snapshot is None
        assert view.seen == []


class TestReconciliation:
    """Tests for changes reaching the snapshot."""

    @pytest.mark.asyncio
    async def test_vote_visible_only_after_notification(self, unit_env):
        """Voting does not touch the snapshot; the refresh it triggers does."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        feedback_repo = await unit_env.get(FeedbackRepository)
        feedback = await feedback_repo.save(make_feedback())
        await view.set_voter(UserId("alice"))

        async with view:
            before = view.snapshot
            assert before.user_vote(feedback.id) is None

            # Act
            response = await view.vote(feedback.id, VoteType.UP)

            # Assert
            assert response.action is VoteAction.CREATE
            assert view.snapshot is before
            await eventually(
                lambda: view.snapshot.user_vote(feedback.id) is VoteType.UP
            )
            assert view.snapshot.get(feedback.id).vote_count == 1

    @pytest.mark.asyncio
    async def test_other_users_votes_reorder_list(self, unit_env):
        """Votes cast elsewhere re-rank the list once notified."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        feedback_repo = await unit_env.get(FeedbackRepository)
        vote_repo = await unit_env.get(VoteRepository)
        older = await feedback_repo.save(make_feedback("Older", minutes=1))
        await feedback_repo.save(make_feedback("Newer", minutes=2))

        async with view:
            assert [i.title for i in view.snapshot.items] == ["Newer", "Older"]

            # Act
            await vote_repo.save(make_vote(older.id, "bob", VoteType.UP))

            # Assert
            await eventually(
                lambda: [i.title for i in view.snapshot.items] == ["Older", "Newer"]
            )

    @pytest.mark.asyncio
    async def test_submission_appears_after_notification(self, unit_env):
        """Submitted feedback shows up through the refresh it triggers."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        await view.set_voter(UserId("alice"))

        async with view:
            assert view.snapshot.items == ()

            # Act
            response = await view.submit("Dark mode", "Please")

            # Assert
            assert response.created_by == "alice"
            await eventually(lambda: len(view.snapshot.items) == 1)
            assert view.snapshot.items[0].title == "Dark mode"

    @pytest.mark.asyncio
    async def test_set_voter_reloads_annotations(self, unit_env):
        """Signing in refreshes so the viewer's votes appear."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        feedback_repo = await unit_env.get(FeedbackRepository)
        vote_repo = await unit_env.get(VoteRepository)
        feedback = await feedback_repo.save(make_feedback())
        await vote_repo.save(make_vote(feedback.id, "alice", VoteType.DOWN))

        async with view:
            assert view.snapshot.user_vote(feedback.id) is None

            # Act
            await view.set_voter(UserId("alice"))

            # Assert
            assert view.voter == "alice"
            await eventually(
                lambda: view.snapshot.user_vote(feedback.id) is VoteType.DOWN
            )

            # Signing out clears the annotation again
            await view.set_voter(None)
            await eventually(lambda: view.snapshot.user_vote(feedback.id) is None)

    @pytest.mark.asyncio
    async def test_fetch_failure_shows_error_not_stale_items(self, unit_env):
        """A failing refresh replaces the list with an error snapshot."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        feedback_repo = await unit_env.get(FeedbackRepository)
        store = await unit_env.get(InMemoryStore)
        await feedback_repo.save(make_feedback())

        async with view:
            assert len(view.snapshot.items) == 1

            # Act
            store.fail_on.add("find_all_with_votes")
            await view.refresh()

            # Assert
            assert view.snapshot.items == ()
            assert view.snapshot.error == "find_all_with_votes unavailable"


class TestAuthRequired:
    """Tests for signed-out actions."""

    @pytest.mark.asyncio
    async def test_signed_out_vote_calls_hook(self, unit_env):
        """Anonymous votes go to the sign-in hook without touching the store."""
        # Arrange
        view = await unit_env.get(FeedbackView)
        feedback_repo = await unit_env.get(FeedbackRepository)
        store = await unit_env.get(InMemoryStore)
        feedback = await feedback_repo.save(make_feedback())
        prompts = []
        view.on_auth_required = lambda: prompts.append("sign-in")

        async with view:
            # Act
            result = await view.vote(feedback.id, VoteType.UP)

        # Assert
        assert result is None
        assert prompts == ["sign-in"]
        assert store.calls["find_by_user_and_feedback"] == 0
        assert store.votes == []

    @pytest.mark.asyncio
    async def test_signed_out_submit_calls_hook(self, unit_env):
        """Anonymous submissions go to the sign-in hook."""
        view = await unit_env.get(FeedbackView)
        store = await unit_env.get(InMemoryStore)
        prompts = []
        view.on_auth_required = lambda: prompts.append("sign-in")

        result = await view.submit("Dark mode")

        assert result is None
        assert prompts == ["sign-in"]
        assert store.feedback == {}

    @pytest.mark.asyncio
    async def test_vote_failure_propagates(self, unit_env):
        """Backend errors on a vote reach the caller."""
        view = await unit_env.get(FeedbackView)
        feedback_repo = await unit_env.get(FeedbackRepository)
        store = await unit_env.get(InMemoryStore)
        feedback = await feedback_repo.save(make_feedback())
        store.fail_on.add("find_by_user_and_feedback")
        await view.set_voter(UserId("alice"))

        with pytest.raises(ProviderError):
            await view.vote(feedback.id, VoteType.UP)
