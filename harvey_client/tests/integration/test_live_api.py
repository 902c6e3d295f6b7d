"""
tests/integration/test_live_api.py
──────────────────────────────────────────────────────────────────────────────
Integration tests against a live Harvey API.

These tests are marked @pytest.mark.integration and are SKIPPED in the
standard test run.  Expected values reflect the production dataset and may
drift as it is updated.

Run with:
  pytest -m integration harvey_client/tests/integration/test_live_api.py -v

Environment:
  HARVEY_URL, HARVEY_USERNAME, HARVEY_PASSWORD (or a .env file)
"""
from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def live_client():
    """Create a real HarveyClient wired from the environment."""
    from harvey_client.config.settings import get_settings
    from harvey_client.services.container import build_client

    settings = get_settings()
    if not settings.api_url:
        pytest.skip("HARVEY_URL is not set")
    return build_client(settings)


class TestIsco:
    def test_fulltext_by_title(self, live_client):
        assert len(live_client.fulltext_isco("Agromechatronik")) == 1

    def test_fulltext_by_code(self, live_client):
        assert len(live_client.fulltext_isco("7233011")) == 1

    def test_isco_esco(self, live_client):
        assert len(live_client.search_isco_esco(["1114004"])) > 0


class TestWorkAreas:
    def test_page_size_respected(self, live_client):
        assert len(live_client.search_isco_work_area(page=1, per_page=15)) == 15

    def test_large_page(self, live_client):
        assert len(live_client.search_isco_work_area(page=1, per_page=1000)) > 30

    def test_single_work_area(self, live_client):
        work_area = live_client.get_isco_work_area(5)
        assert work_area["title"] == "Poľnohospodárstvo, záhradníctvo, rybolov a veterinárstvo"


class TestPosition:
    def test_get_position(self, live_client):
        position = live_client.get_position(5349)
        assert position["idIstp"] == 5349
        assert position["title"] == "Dispečer, výpravca v železničnej doprave"
