import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.delenv("CMS_API_URL", raising=False)

    from customizer.core.settings import get_settings

    get_settings.cache_clear()

    from customizer.main import app

    with TestClient(app) as test_client:
        yield test_client

    get_settings.cache_clear()
