"""SQLAlchemy-backed request transaction."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from devflow.domain.repository import Transaction


class SessionTransaction(Transaction):
    """Transaction over the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def rollback(self) -> None:
        """Roll back the session's open transaction."""
        with logfire.span("persistence.rollback"):
            await self.session.rollback()
