"""Route class that rolls back failed requests."""

from typing import Any, Callable, Coroutine

from dishka.integrations.fastapi import DishkaRoute
from fastapi import Request, Response

from devflow.domain.repository import Transaction


class TransactionalRoute(DishkaRoute):
    """DishkaRoute that rolls back the request transaction on failure.

    Routes turn errors into ``HTTPException`` before the DI container closes,
    so the container alone would commit the work of a failed request.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def transactional_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except Exception:
                transaction = await request.state.dishka_container.get(Transaction)
                await transaction.rollback()
                raise

        return transactional_handler
