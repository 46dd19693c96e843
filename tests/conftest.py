from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.config import settings
from src.core.knowledge import KnowledgeBase, build_knowledge_base, get_knowledge_base
from src.schemas.knowledge import Condition, ConditionSeverity

@pytest.fixture(scope="session")
def knowledge_base() -> KnowledgeBase:
    """
    The shipped catalogs, built once like the app does at startup.
    """
    return build_knowledge_base()

@pytest.fixture
def flu_catalog():
    return [
        Condition(
            id="influenza",
            name="Influenza",
            symptoms=("fever", "cough", "fatigue", "headache"),
            severity=ConditionSeverity.MEDIUM,
            recommendations=("rest",),
        ),
        Condition(
            id="tensionHeadache",
            name="Tension headache",
            symptoms=("headache", "neckPain", "stress", "insomnia", "jawPain"),
            severity=ConditionSeverity.LOW,
        ),
    ]

@pytest.fixture(autouse=True)
def no_simulated_latency(monkeypatch):
    """
    Tests never wait for the UX delay, whatever the local .env says.
    """
    monkeypatch.setattr(settings, "ANALYSIS_DELAY_SECONDS", 0.0)
    monkeypatch.setattr(settings, "CDS_SIMULATE_VITALS", False)

@pytest.fixture(scope="function")
async def client(knowledge_base) -> AsyncGenerator[AsyncClient, None]:
    """
    Creates a FastAPI Test Client wired to the shared knowledge base.
    """
    app.dependency_overrides[get_knowledge_base] = lambda: knowledge_base

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
