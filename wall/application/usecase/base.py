"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One user-facing operation: a pydantic request in, a response out.

    Use cases hold no state between calls, so live views can run them on
    every refresh.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
