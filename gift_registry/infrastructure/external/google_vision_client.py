"""Google Cloud Vision client for item photo analysis."""
import asyncio
import base64
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx

from ...core.config import get_settings
from ...domain.exceptions import ProviderError
from ...domain.models.tag_set import Annotation, RGB, RawImageSignals
from ...domain.providers.image_analysis_provider import ImageAnalysisProvider
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class GoogleVisionClient(ImageAnalysisProvider):
    """
    ImageAnalysisProvider backed by the Vision REST API (images:annotate).

    One request per photo with label, object, text and image-property
    detection. The call is made once with a bounded timeout; any failure is
    raised as ProviderError with a kind the API layer can map to a status.
    """

    FEATURE_TYPES = (
        "LABEL_DETECTION",
        "OBJECT_LOCALIZATION",
        "TEXT_DETECTION",
        "IMAGE_PROPERTIES",
    )

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        max_results: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.google_vision_api_key
        self.endpoint = endpoint or settings.google_vision_url
        self.timeout = timeout if timeout is not None else settings.vision_timeout_seconds
        self.max_results = max_results if max_results is not None else settings.vision_max_labels
        self._http_client = http_client

        if not self.api_key:
            logger.warning("GOOGLE_VISION_API_KEY not found in environment variables")

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_shared_http_client()
        return self._http_client

    async def analyze(self, image_ref: str) -> RawImageSignals:
        """
        Analyze the stored photo at image_ref.

        Args:
            image_ref: Path of the photo on local storage

        Returns:
            RawImageSignals with labels, objects, text and dominant colors

        Raises:
            ProviderError: with kind network, timeout, auth, quota,
                malformed_image, unavailable or invalid_response
        """
        if not self.api_key:
            raise ProviderError("Google Vision API key is not configured", kind=ProviderError.AUTH)

        content = await self._read_image(image_ref)
        payload = self._build_payload(content)

        try:
            logger.debug(f"Requesting image analysis for {image_ref}")
            response = await self.http_client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout while analyzing image {image_ref}")
            raise ProviderError(f"Image analysis timed out: {e}", kind=ProviderError.TIMEOUT) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"HTTP error analyzing image {image_ref}: {status_code} - {e.response.text}")
            raise ProviderError(
                f"Image analysis failed with HTTP {status_code}",
                kind=self._kind_for_status(status_code),
                status_code=status_code,
            ) from e
        except httpx.TransportError as e:
            logger.error(f"Network error analyzing image {image_ref}: {e}")
            raise ProviderError(f"Image analysis request failed: {e}", kind=ProviderError.NETWORK) from e

        try:
            body = response.json()
        except ValueError as e:
            raise ProviderError(
                "Image analysis returned a non-JSON body",
                kind=ProviderError.INVALID_RESPONSE,
                status_code=response.status_code,
            ) from e

        return self._parse_response(body)

    async def _read_image(self, image_ref: str) -> bytes:
        try:
            content = await asyncio.to_thread(Path(image_ref).read_bytes)
        except OSError as e:
            raise ProviderError(
                f"Could not read image {image_ref}: {e}",
                kind=ProviderError.MALFORMED_IMAGE,
            ) from e
        if not content:
            raise ProviderError(f"Image {image_ref} is empty", kind=ProviderError.MALFORMED_IMAGE)
        return content

    def _build_payload(self, content: bytes) -> Dict[str, Any]:
        return {
            "requests": [
                {
                    "image": {"content": base64.b64encode(content).decode("utf-8")},
                    "features": [
                        {"type": feature_type, "maxResults": self.max_results}
                        for feature_type in self.FEATURE_TYPES
                    ],
                }
            ]
        }

    @staticmethod
    def _kind_for_status(status_code: int) -> str:
        if status_code in (401, 403):
            return ProviderError.AUTH
        if status_code == 429:
            return ProviderError.QUOTA
        if status_code == 400:
            return ProviderError.MALFORMED_IMAGE
        return ProviderError.UNAVAILABLE

    def _parse_response(self, body: Any) -> RawImageSignals:
        """
        Convert an images:annotate response into RawImageSignals.

        Missing sections become empty sequences; missing color channels are 0.
        """
        responses = body.get("responses") if isinstance(body, dict) else None
        if not isinstance(responses, list) or not responses:
            raise ProviderError("Image analysis response has no results", kind=ProviderError.INVALID_RESPONSE)

        result = responses[0] or {}
        error = result.get("error")
        if error:
            raise ProviderError(
                f"Image rejected by analysis provider: {error.get('message', 'unknown error')}",
                kind=ProviderError.MALFORMED_IMAGE,
                status_code=error.get("code"),
            )

        labels = self._annotations(result.get("labelAnnotations"), "description")
        objects = self._annotations(result.get("localizedObjectAnnotations"), "name")
        detected_text = tuple(
            entry["description"]
            for entry in result.get("textAnnotations") or []
            if entry.get("description")
        )

        colors = (
            ((result.get("imagePropertiesAnnotation") or {}).get("dominantColors") or {}).get("colors")
            or []
        )
        dominant_colors = tuple(self._rgb(entry.get("color") or {}) for entry in colors)

        return RawImageSignals(
            labels=labels,
            objects=objects,
            detected_text=detected_text,
            dominant_colors_rgb=dominant_colors,
        )

    @staticmethod
    def _annotations(entries: Optional[List[Dict[str, Any]]], name_key: str) -> Tuple[Annotation, ...]:
        annotations = []
        for entry in entries or []:
            description = entry.get(name_key)
            if not description:
                continue
            annotations.append(Annotation(description=description, score=float(entry.get("score", 0.0))))
        return tuple(annotations)

    @staticmethod
    def _rgb(color: Dict[str, Any]) -> RGB:
        return (
            int(round(color.get("red", 0))),
            int(round(color.get("green", 0))),
            int(round(color.get("blue", 0))),
        )
