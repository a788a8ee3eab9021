import pytest

from core.config import Settings
from core.models import Site
from tests.fakes import FakeClientFactory, FakeWebflow

DEMO_RECORD = {
    "id": "abc123",
    "displayName": "Demo",
    "shortName": "demo",
    "workspaceId": "w1",
    "createdOn": None,
    "lastPublished": None,
    "previewUrl": None,
}


@pytest.fixture
def demo_site():
    return Site.from_api(DEMO_RECORD)


@pytest.fixture
def fake_webflow(demo_site):
    return FakeWebflow(site=demo_site, sites=[demo_site])


@pytest.fixture
def client_factory(fake_webflow):
    return FakeClientFactory(fake_webflow)


@pytest.fixture
def settings():
    return Settings(api_token="test-token", api_base_url="https://webflow.test/v2")
