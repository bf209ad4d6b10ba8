from typing import TYPE_CHECKING

from ...domain.repositories.item_repository import ItemRepository
from ...domain.providers.image_analysis_provider import ImageAnalysisProvider
from ...domain.services.tag_extractor import TagExtractor
from ...application.use_cases.item.ingest_item import IngestItemUseCase
from ...application.use_cases.item.get_item import GetItemUseCase
from ...application.use_cases.item.list_items import ListItemsUseCase
from ...application.use_cases.item.update_item import UpdateItemUseCase
from ...application.use_cases.item.delete_item import DeleteItemUseCase
from ...application.use_cases.item.record_gift import RecordGiftUseCase
from ...infrastructure.external.google_vision_client import GoogleVisionClient
from ...infrastructure.storage.photo_storage import PhotoStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ItemProvider:
    """Item use case provider - registers ingestion and item administration use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the image-analysis provider, photo storage and item use cases.
        Use cases are created on-demand via factories.
        """
        # Shared across all use cases; tests may register their own first
        if not container.is_registered(ImageAnalysisProvider):
            container.register_singleton(ImageAnalysisProvider, GoogleVisionClient())

        if not container.is_registered(PhotoStorage):
            container.register_singleton(PhotoStorage, PhotoStorage())

        container.register_factory(
            TagExtractor,
            lambda: TagExtractor(provider=container.get(ImageAnalysisProvider))
        )

        container.register_factory(
            IngestItemUseCase,
            lambda: IngestItemUseCase(
                item_repository=container.get(ItemRepository),
                tag_extractor=container.get(TagExtractor),
                photo_storage=container.get(PhotoStorage),
            )
        )

        container.register_factory(
            GetItemUseCase,
            lambda: GetItemUseCase(item_repository=container.get(ItemRepository))
        )

        container.register_factory(
            ListItemsUseCase,
            lambda: ListItemsUseCase(item_repository=container.get(ItemRepository))
        )

        container.register_factory(
            UpdateItemUseCase,
            lambda: UpdateItemUseCase(item_repository=container.get(ItemRepository))
        )

        container.register_factory(
            DeleteItemUseCase,
            lambda: DeleteItemUseCase(item_repository=container.get(ItemRepository))
        )

        container.register_factory(
            RecordGiftUseCase,
            lambda: RecordGiftUseCase(item_repository=container.get(ItemRepository))
        )
