"""
Integration tests for item API endpoints.
Uses TestClient with mocked use cases, plus an in-memory wired container (no real DB or Vision API).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from gift_registry.application.dto.item_dto import ItemResponse, MessageResponse
from gift_registry.application.use_cases.item.delete_item import DeleteItemUseCase
from gift_registry.application.use_cases.item.get_item import GetItemUseCase
from gift_registry.application.use_cases.item.ingest_item import IngestItemUseCase
from gift_registry.application.use_cases.item.update_item import UpdateItemUseCase
from gift_registry.application.use_cases.search.search_items import SearchItemsUseCase
from gift_registry.domain.exceptions import NotFoundError, ProviderError, StoreError, ValidationError
from gift_registry.domain.providers.image_analysis_provider import ImageAnalysisProvider


def _item_response(item_id: str = "ITM-1", **overrides) -> ItemResponse:
    data = {
        "id": item_id,
        "category": "toys",
        "age_ranges": ["older-child"],
        "keywords": ["lego"],
        "availability": "available",
        "uploaded_at": datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return ItemResponse(**data)


@pytest.fixture
def mock_use_cases():
    return {
        IngestItemUseCase: AsyncMock(spec=IngestItemUseCase),
        GetItemUseCase: AsyncMock(spec=GetItemUseCase),
        UpdateItemUseCase: AsyncMock(spec=UpdateItemUseCase),
        DeleteItemUseCase: AsyncMock(spec=DeleteItemUseCase),
        SearchItemsUseCase: AsyncMock(spec=SearchItemsUseCase),
    }


@pytest.fixture
def mock_container(mock_use_cases):
    container = MagicMock()
    container.get.side_effect = lambda cls: mock_use_cases.get(cls, None)
    return container


@pytest.fixture
def client(mock_settings, mock_container):
    """Create test client with mocked container."""
    from gift_registry.main import app

    with patch("gift_registry.api.v1.item_controller.get_container", return_value=mock_container):
        with TestClient(app) as c:
            yield c


class TestItemAPIErrorMapping:
    """Status codes returned for domain errors"""

    def test_get_found(self, client, mock_use_cases):
        mock_use_cases[GetItemUseCase].execute.return_value = _item_response()
        response = client.get("/api/v1/items/ITM-1")
        assert response.status_code == 200
        assert response.json()["keywords"] == ["lego"]

    def test_not_found_returns_404(self, client, mock_use_cases):
        mock_use_cases[GetItemUseCase].execute.side_effect = NotFoundError("Item", "ITM-404")
        response = client.get("/api/v1/items/ITM-404")
        assert response.status_code == 404
        assert response.json() == {"detail": "Item not found"}

    def test_validation_returns_400(self, client, mock_use_cases):
        mock_use_cases[SearchItemsUseCase].execute.side_effect = ValidationError("Query is required")
        response = client.post("/api/v1/items/search", json={"query": " "})
        assert response.status_code == 400
        assert response.json() == {"detail": "Query is required"}

    def test_provider_failure_returns_502(self, client, mock_use_cases):
        mock_use_cases[IngestItemUseCase].execute.side_effect = ProviderError("quota", kind=ProviderError.QUOTA)
        response = client.post(
            "/api/v1/items/upload",
            files=[("photos", ("front.png", b"png bytes", "image/png"))],
        )
        assert response.status_code == 502
        assert response.json()["detail"] == "Image analysis failed. Please try again."

    def test_provider_timeout_returns_504(self, client, mock_use_cases):
        mock_use_cases[IngestItemUseCase].execute.side_effect = ProviderError("slow", kind=ProviderError.TIMEOUT)
        response = client.post(
            "/api/v1/items/upload",
            files=[("photos", ("front.png", b"png bytes", "image/png"))],
        )
        assert response.status_code == 504

    def test_store_failure_returns_500(self, client, mock_use_cases):
        mock_use_cases[DeleteItemUseCase].execute.side_effect = StoreError("db down", operation="delete")
        response = client.delete("/api/v1/items/ITM-1")
        assert response.status_code == 500
        assert "db down" not in response.json()["detail"]

    def test_delete(self, client, mock_use_cases):
        mock_use_cases[DeleteItemUseCase].execute.return_value = MessageResponse(message="Item deleted successfully")
        response = client.delete("/api/v1/items/ITM-1")
        assert response.status_code == 200
        assert response.json() == {"message": "Item deleted successfully"}

    def test_update_rejects_tag_fields(self, client, mock_use_cases):
        response = client.put("/api/v1/items/ITM-1", json={"category": "books"})
        assert response.status_code == 422
        mock_use_cases[UpdateItemUseCase].execute.assert_not_called()

    def test_update_rejects_unknown_condition(self, client, mock_use_cases):
        response = client.put("/api/v1/items/ITM-1", json={"condition": "broken"})
        assert response.status_code == 422

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


@pytest.fixture
def memory_client(mock_settings, fake_provider):
    """Test client over a real container with the in-memory store and a fake image provider."""
    from gift_registry.di.container import DIContainer
    from gift_registry.main import app

    container = DIContainer()
    container.register_singleton(ImageAnalysisProvider, fake_provider)

    with patch("gift_registry.api.v1.item_controller.get_container", return_value=container):
        with TestClient(app) as c:
            yield c


class TestItemAPIFlow:
    """Upload, search, update and gift an item end to end"""

    def _upload(self, client):
        response = client.post(
            "/api/v1/items/upload",
            files=[
                ("photos", ("front.png", b"png bytes", "image/png")),
                ("photos", ("back.jpg", b"jpg bytes", "image/jpeg")),
            ],
        )
        assert response.status_code == 201
        return response.json()

    def test_upload_returns_item_and_tags(self, memory_client):
        body = self._upload(memory_client)
        assert body["message"] == "Item created successfully with AI tagging"
        assert body["tag_set"]["category"] == "toys"
        assert body["tag_set"]["keywords"] == ["lego", "toy"]
        assert body["item"]["availability"] == "available"
        assert [photo["is_primary"] for photo in body["item"]["photos"]] == [True, False]
        assert body["item"]["photos"][0]["url"].startswith("/uploads/")

    def test_upload_rejects_non_images(self, memory_client, fake_provider):
        response = memory_client.post(
            "/api/v1/items/upload",
            files=[("photos", ("notes.txt", b"hello", "text/plain"))],
        )
        assert response.status_code == 400
        assert fake_provider.calls == []

    def test_search_then_gift(self, memory_client):
        item_id = self._upload(memory_client)["item"]["id"]

        response = memory_client.post("/api/v1/items/search", json={"query": "red lego toys"})
        assert response.status_code == 200
        body = response.json()
        assert body["filters"]["age_range"] is None
        assert body["filters"]["category"] == "toys"
        assert [item["id"] for item in body["items"]] == [item_id]

        response = memory_client.post(
            f"/api/v1/items/{item_id}/gift",
            json={"recipient_name": "Maya", "recipient_age": 8, "occasion": "birthday"},
        )
        assert response.status_code == 200
        assert response.json()["availability"] == "gifted"

        response = memory_client.post("/api/v1/items/search", json={"query": "red lego toys"})
        assert response.json()["count"] == 0

        response = memory_client.get("/api/v1/items", params={"availability": "gifted"})
        assert [item["id"] for item in response.json()["items"]] == [item_id]

    def test_update_administrative_fields(self, memory_client):
        item_id = self._upload(memory_client)["item"]["id"]

        response = memory_client.put(
            f"/api/v1/items/{item_id}",
            json={"location": "Closet shelf 2", "condition": "like-new", "notes": "box is sealed"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["location"] == "Closet shelf 2"
        assert body["condition"] == "like-new"
        assert body["category"] == "toys"
        assert body["updated_at"] is not None

    def test_list_filters(self, memory_client):
        self._upload(memory_client)
        response = memory_client.get("/api/v1/items", params={"category": "books"})
        assert response.status_code == 200
        assert response.json() == {"items": [], "count": 0}

        response = memory_client.get("/api/v1/items", params={"availability": "lost"})
        assert response.status_code == 422

    def test_missing_item_returns_404(self, memory_client):
        assert memory_client.get("/api/v1/items/ITM-404").status_code == 404
        assert memory_client.delete("/api/v1/items/ITM-404").status_code == 404
