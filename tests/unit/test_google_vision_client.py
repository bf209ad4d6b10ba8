"""
Unit tests for GoogleVisionClient using httpx.MockTransport (no network).
"""
import base64
import json

import httpx
import pytest

from gift_registry.domain.exceptions import ProviderError
from gift_registry.infrastructure.external.google_vision_client import GoogleVisionClient

ENDPOINT = "https://vision.test/v1/images:annotate"

ANNOTATE_RESPONSE = {
    "responses": [
        {
            "labelAnnotations": [
                {"description": "Lego", "score": 0.97},
                {"description": "Toy", "score": 0.93},
            ],
            "localizedObjectAnnotations": [{"name": "Toy", "score": 0.88}],
            "textAnnotations": [{"description": "LEGO City"}, {"description": "LEGO"}],
            "imagePropertiesAnnotation": {
                "dominantColors": {
                    "colors": [
                        {"color": {"red": 250, "green": 10, "blue": 10}, "score": 0.5},
                        {"color": {"green": 200.4}, "score": 0.3},
                    ]
                }
            },
        }
    ]
}


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "photo.png"
    path.write_bytes(b"\x89PNG fake image bytes")
    return str(path)


def _client(handler, api_key="test-key"):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GoogleVisionClient(
        api_key=api_key,
        endpoint=ENDPOINT,
        timeout=5.0,
        max_results=7,
        http_client=http_client,
    )


class TestGoogleVisionClient:
    @pytest.mark.asyncio
    async def test_request_and_parsing(self, image_path):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=ANNOTATE_RESPONSE)

        signals = await _client(handler).analyze(image_path)

        assert seen["url"].params["key"] == "test-key"
        vision_request = seen["body"]["requests"][0]
        assert base64.b64decode(vision_request["image"]["content"]) == b"\x89PNG fake image bytes"
        assert [feature["type"] for feature in vision_request["features"]] == [
            "LABEL_DETECTION", "OBJECT_LOCALIZATION", "TEXT_DETECTION", "IMAGE_PROPERTIES",
        ]
        assert all(feature["maxResults"] == 7 for feature in vision_request["features"])

        assert [(a.description, a.score) for a in signals.labels] == [("Lego", 0.97), ("Toy", 0.93)]
        assert [(a.description, a.score) for a in signals.objects] == [("Toy", 0.88)]
        assert signals.detected_text == ("LEGO City", "LEGO")
        # Missing channels default to 0
        assert signals.dominant_colors_rgb == ((250, 10, 10), (0, 200, 0))

    @pytest.mark.asyncio
    async def test_empty_result_sections(self, image_path):
        client = _client(lambda request: httpx.Response(200, json={"responses": [{}]}))
        signals = await client.analyze(image_path)
        assert signals.labels == ()
        assert signals.objects == ()
        assert signals.detected_text == ()
        assert signals.dominant_colors_rgb == ()

    @pytest.mark.parametrize(
        "status_code,kind",
        [
            (400, ProviderError.MALFORMED_IMAGE),
            (401, ProviderError.AUTH),
            (403, ProviderError.AUTH),
            (429, ProviderError.QUOTA),
            (500, ProviderError.UNAVAILABLE),
            (503, ProviderError.UNAVAILABLE),
        ],
    )
    @pytest.mark.asyncio
    async def test_http_errors_classified(self, image_path, status_code, kind):
        client = _client(lambda request: httpx.Response(status_code, json={"error": {"message": "nope"}}))
        with pytest.raises(ProviderError) as exc_info:
            await client.analyze(image_path)
        assert exc_info.value.kind == kind
        assert exc_info.value.status_code == status_code

    @pytest.mark.asyncio
    async def test_timeout(self, image_path):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ProviderError) as exc_info:
            await _client(handler).analyze(image_path)
        assert exc_info.value.kind == ProviderError.TIMEOUT

    @pytest.mark.asyncio
    async def test_network_error(self, image_path):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderError) as exc_info:
            await _client(handler).analyze(image_path)
        assert exc_info.value.kind == ProviderError.NETWORK

    @pytest.mark.asyncio
    async def test_per_image_error(self, image_path):
        body = {"responses": [{"error": {"code": 3, "message": "Bad image data."}}]}
        with pytest.raises(ProviderError) as exc_info:
            await _client(lambda request: httpx.Response(200, json=body)).analyze(image_path)
        assert exc_info.value.kind == ProviderError.MALFORMED_IMAGE

    @pytest.mark.asyncio
    async def test_non_json_body(self, image_path):
        client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(ProviderError) as exc_info:
            await client.analyze(image_path)
        assert exc_info.value.kind == ProviderError.INVALID_RESPONSE

    @pytest.mark.asyncio
    async def test_missing_responses(self, image_path):
        client = _client(lambda request: httpx.Response(200, json={}))
        with pytest.raises(ProviderError) as exc_info:
            await client.analyze(image_path)
        assert exc_info.value.kind == ProviderError.INVALID_RESPONSE

    @pytest.mark.asyncio
    async def test_unreadable_file(self, tmp_path):
        calls = []
        client = _client(lambda request: calls.append(request) or httpx.Response(200, json=ANNOTATE_RESPONSE))
        with pytest.raises(ProviderError) as exc_info:
            await client.analyze(str(tmp_path / "missing.png"))
        assert exc_info.value.kind == ProviderError.MALFORMED_IMAGE
        assert calls == []

    @pytest.mark.asyncio
    async def test_missing_api_key(self, image_path):
        client = _client(lambda request: httpx.Response(200, json=ANNOTATE_RESPONSE), api_key="")
        with pytest.raises(ProviderError) as exc_info:
            await client.analyze(image_path)
        assert exc_info.value.kind == ProviderError.AUTH
