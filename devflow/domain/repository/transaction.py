"""Transaction interface."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """The unit of work of a single request.

    Work is committed when the request finishes. A request that fails calls
    ``rollback`` so none of its writes are kept.
    """

    @abstractmethod
    async def rollback(self) -> None:
        """Discard everything written so far in this request."""
        pass
