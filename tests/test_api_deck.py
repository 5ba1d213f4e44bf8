"""Tests for deck API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from spiesdeck.api.dependencies import get_catalog_dependency, get_deck_store
from spiesdeck.main import app
from spiesdeck.services.deck_store import DeckStore


@pytest.fixture
def store() -> DeckStore:
    return DeckStore()


@pytest.fixture
async def client(catalog, store):
    """Provide an async test client bound to the test catalog and a fresh deck."""
    app.dependency_overrides[get_catalog_dependency] = lambda: catalog
    app.dependency_overrides[get_deck_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestDeckMutation:
    async def test_empty_deck(self, client: AsyncClient) -> None:
        response = await client.get("/deck")

        assert response.status_code == 200
        data = response.json()
        assert data["entries"] == []
        assert data["code"] == ""
        assert data["stats"]["total_cards"] == 0
        assert data["stats"]["deck_size_target"] == 30

    async def test_add_and_stats(self, client: AsyncClient) -> None:
        await client.post("/deck/cards/1")
        await client.post("/deck/cards/1")
        response = await client.post("/deck/cards/2")

        assert response.status_code == 200
        data = response.json()
        assert data["code"] == "1-2,2-1"
        assert [(e["card"]["id"], e["quantity"]) for e in data["entries"]] == [
            ("1", 2),
            ("2", 1),
        ]
        stats = data["stats"]
        assert stats["total_cards"] == 3
        assert stats["average_intel"] == 4.3
        assert stats["average_strength"] == 4.7
        assert stats["counts_by_type"] == {"Agent": 2, "Item": 1}
        assert stats["counts_by_trigger"] == {"Ambush": 2, "Payoff": 1}
        assert stats["counts_by_suit"] == {"Combat": 2, "System": 1}

    async def test_add_past_cap_is_ignored(self, client: AsyncClient, store: DeckStore) -> None:
        for _ in range(3):
            response = await client.post("/deck/cards/3")

        assert response.status_code == 200
        assert response.json()["code"] == "3-2"
        assert store.quantity_of("3") == 2

    async def test_add_unknown_card(self, client: AsyncClient) -> None:
        response = await client.post("/deck/cards/404")

        assert response.status_code == 404
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "not_found"
        assert "404" in data["failure"]["message"]

    async def test_remove_card(self, client: AsyncClient) -> None:
        await client.post("/deck/cards/1")
        await client.post("/deck/cards/1")

        response = await client.delete("/deck/cards/1")
        assert response.json()["code"] == "1-1"

        response = await client.delete("/deck/cards/1")
        assert response.json()["entries"] == []

    async def test_remove_card_not_in_deck(self, client: AsyncClient) -> None:
        response = await client.delete("/deck/cards/2")

        assert response.status_code == 200
        assert response.json()["version"] == 0

    async def test_clear_deck(self, client: AsyncClient, store: DeckStore) -> None:
        await client.post("/deck/cards/1")
        await client.post("/deck/cards/2")

        response = await client.delete("/deck")

        assert response.status_code == 200
        assert response.json()["entries"] == []
        assert store.deck.is_empty


class TestDeckStatsAndCode:
    async def test_stats_endpoint(self, client: AsyncClient) -> None:
        await client.post("/deck/cards/3")

        response = await client.get("/deck/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["total_cards"] == 1
        assert data["counts_by_suit"] == {"Stealth": 1, "System": 1}

    async def test_code_endpoint(self, client: AsyncClient) -> None:
        await client.post("/deck/cards/4")

        response = await client.get("/deck/code")

        assert response.json() == {"code": "4-1"}


class TestDeckImport:
    async def test_import_replaces_deck(self, client: AsyncClient, store: DeckStore) -> None:
        await client.post("/deck/cards/3")

        response = await client.post("/deck/import", json={"code": "1-2, 2-1"})

        assert response.status_code == 200
        assert response.json()["code"] == "1-2,2-1"
        assert store.deck.to_quantities() == {"1": 2, "2": 1}

    async def test_malformed_code_leaves_deck_untouched(
        self, client: AsyncClient, store: DeckStore
    ) -> None:
        await client.post("/deck/cards/3")

        response = await client.post("/deck/import", json={"code": "1-2,BAD,3-1"})

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "malformed_entry"
        assert store.deck.to_quantities() == {"3": 1}

    @pytest.mark.parametrize(
        ("code", "kind"),
        [
            ("", "empty_code"),
            ("1-3", "invalid_quantity"),
            ("77-1", "unknown_card"),
            ("1-" + "9" * 5000, "invalid_quantity"),
        ],
    )
    async def test_import_failures_are_classified(
        self, client: AsyncClient, code: str, kind: str
    ) -> None:
        response = await client.post("/deck/import", json={"code": code})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == kind

    async def test_import_requires_code(self, client: AsyncClient) -> None:
        response = await client.post("/deck/import", json={})
        assert response.status_code == 422


class TestDeckExport:
    async def test_export_empty_deck(self, client: AsyncClient) -> None:
        response = await client.get("/deck/export")

        assert response.status_code == 204
        assert response.content == b""

    async def test_export_report(self, client: AsyncClient) -> None:
        await client.post("/deck/cards/1")
        await client.post("/deck/cards/2")

        response = await client.get("/deck/export", params={"title": "Night Ops"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'filename="night_ops-' in response.headers["content-disposition"]
        text = response.text
        assert text.startswith("Night Ops - ")
        assert "Total Cards: 2 / 30" in text
        assert text.rstrip("\n").endswith("Deck Code:\n1-1,2-1")

    async def test_export_default_title(self, client: AsyncClient) -> None:
        await client.post("/deck/cards/1")

        response = await client.get("/deck/export")

        assert response.text.startswith("My Deck - ")
