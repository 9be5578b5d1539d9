"""Domain value objects for the feedback wall.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from wall.domain.value.common import ValueObject


class VoteType(str, Enum):
    """Polarity of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Contribution of this vote to the net count."""
        return 1 if self is VoteType.UP else -1


class VoteAction(str, Enum):
    """Mutation applied when a user clicks a vote button."""

    CREATE = "create"
    CHANGE = "change"
    RETRACT = "retract"


class Collection(str, Enum):
    """Record collections that publish change notifications.

    Values match the backing table names.
    """

    FEEDBACK = "feedback"
    VOTES = "votes"


class ChangeEvent(str, Enum):
    """Kind of row change reported by the backend."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class ChangeNotification(ValueObject):
    """A change happened on a collection.

    Carries no row data: consumers always re-fetch instead of trusting
    the payload.
    """

    collection: Collection
    event: ChangeEvent
    received_at: datetime = Field(default_factory=datetime.now)
