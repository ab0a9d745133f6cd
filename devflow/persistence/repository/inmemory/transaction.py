"""In-memory transaction for testing."""

from devflow.domain.repository import Transaction


class InMemoryTransaction(Transaction):
    """Counts rollbacks; in-memory repositories write immediately."""

    def __init__(self) -> None:
        self.rollbacks = 0

    async def rollback(self) -> None:
        """Record the rollback."""
        self.rollbacks += 1
