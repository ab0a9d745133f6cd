"""Unit tests for TransactionalRoute."""

from dishka import Provider, Scope, make_async_container, provide
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.testclient import TestClient

from devflow.domain.repository import Transaction
from devflow.interface.api.routing import TransactionalRoute
from devflow.persistence.repository.inmemory import InMemoryTransaction


class TransactionProvider(Provider):
    """Provides a transaction the test can inspect."""

    def __init__(self, transaction: Transaction):
        super().__init__()
        self.transaction = transaction

    @provide(scope=Scope.APP)
    def get_transaction(self) -> Transaction:
        return self.transaction


def _client(transaction: InMemoryTransaction) -> TestClient:
    router = APIRouter(route_class=TransactionalRoute)

    @router.post("/ok")
    async def ok() -> dict:
        return {"ok": True}

    @router.post("/fail")
    async def fail() -> dict:
        raise HTTPException(status_code=400, detail="nope")

    app = FastAPI()
    app.include_router(router)
    setup_dishka(
        make_async_container(TransactionProvider(transaction), FastapiProvider()), app
    )
    return TestClient(app)


class TestTransactionalRoute:
    """A failed request rolls back its transaction."""

    def test_failed_request_rolls_back(self):
        transaction = InMemoryTransaction()

        response = _client(transaction).post("/fail")

        assert response.status_code == 400
        assert transaction.rollbacks == 1

    def test_successful_request_keeps_its_work(self):
        transaction = InMemoryTransaction()

        response = _client(transaction).post("/ok")

        assert response.status_code == 200
        assert transaction.rollbacks == 0
