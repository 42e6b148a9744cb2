import pytest
from fastapi.testclient import TestClient

from order_service.main import app, get_message_source
from order_service.message_source import InMemoryMessageSource
from order_service.models import beer, water, whisky

TEMPLATES = {
    "en": "The total was ${total}, the taxes were ${taxes}. Thank you for your purchase!",
    "pt": "O total foi ${total}, o de taxas foi ${taxes}. Obrigado por sua compra!",
}


@pytest.fixture
def message_source():
    """In-memory stand-in for the template files."""
    return InMemoryMessageSource(TEMPLATES)


@pytest.fixture
def sample_items():
    return [
        beer("Brahma", 10),          # 10% taxes
        whisky("Jack Daniels", 100), # 20% taxes
        water("Crystal", 1),         # 0% taxes
    ]


@pytest.fixture
def client(message_source):
    app.dependency_overrides[get_message_source] = lambda: message_source
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
