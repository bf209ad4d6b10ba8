from abc import ABC, abstractmethod

from ..models.tag_set import RawImageSignals


class ImageAnalysisProvider(ABC):
    """Provider interface - one stateless capability: analyze a stored image"""

    @abstractmethod
    async def analyze(self, image_ref: str) -> RawImageSignals:
        """
        Analyze the image at image_ref.

        Raises:
            ProviderError: network, auth, quota, malformed image, ...
        """
        pass
