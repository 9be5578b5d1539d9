"""Strongly typed identifiers for feedback wall entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

FeedbackId = NewType("FeedbackId", UUID)
VoteId = NewType("VoteId", UUID)

# Issued by the external auth provider, treated as an opaque string
UserId = NewType("UserId", str)
