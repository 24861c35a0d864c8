"""
Fixtures compartidas: cliente de completions falso, almacén en memoria
y TestClient de FastAPI con ambos inyectados.
"""

from typing import Dict, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from api.main import create_app
from idea_validator_core.config import Settings
from idea_validator_core.db.report_store import ReportStore
from idea_validator_core.exceptions import UpstreamError


class FakeCompletionClient:
    """Registra cada llamada y devuelve un texto fijo, o falla si `fail=True`."""

    def __init__(self, reply: str = "Solid idea. Rating: 7/10", fail: bool = False):
        self.reply = reply
        self.fail = fail
        self.calls: List[Dict] = []

    def complete(self, messages, model, max_tokens):
        self.calls.append({"messages": messages, "model": model, "max_tokens": max_tokens})
        if self.fail:
            raise UpstreamError("simulated upstream failure")
        return self.reply


@pytest.fixture
def settings():
    """Settings de prueba, sin depender del entorno."""
    return Settings(openai_api_key="test-key")


@pytest.fixture
def fake_client():
    return FakeCompletionClient()


@pytest.fixture
def failing_client():
    return FakeCompletionClient(fail=True)


@pytest.fixture
def store():
    """Almacén SQLite en memoria, compartido entre hilos del TestClient."""
    s = ReportStore.from_url(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    s.create_schema()
    yield s
    s.dispose()


@pytest.fixture
def client(settings, fake_client, store):
    app = create_app(settings=settings, completion_client=fake_client, report_store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failing_api(settings, failing_client, store):
    app = create_app(settings=settings, completion_client=failing_client, report_store=store)
    with TestClient(app) as c:
        yield c
