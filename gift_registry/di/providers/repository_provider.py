import logging
from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.item_repository import ItemRepository
from ...infrastructure.db.in_memory_item_repository import InMemoryItemRepository
from ...infrastructure.db.mongo_item_repository import MongoItemRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the ItemRepository implementation selected by ITEM_STORE.

        Raises:
            ValueError: If ITEM_STORE names an unknown store
        """
        settings = get_settings()

        if settings.item_store == "mongo":
            container.register_singleton(
                ItemRepository,
                MongoItemRepository(item_collection=container.get("item_collection"))
            )
        elif settings.item_store == "memory":
            container.register_singleton(ItemRepository, InMemoryItemRepository())
        else:
            raise ValueError(f"Unknown ITEM_STORE: {settings.item_store}")

        logger.info(f"Registered {settings.item_store} item repository")
