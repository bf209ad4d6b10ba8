import logging
from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import get_database, get_item_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register database collections in the container.
        Nothing is registered when items are kept in memory (ITEM_STORE=memory).
        """
        settings = get_settings()
        if settings.item_store != "mongo":
            logger.info(f"Item store is '{settings.item_store}', skipping MongoDB registration")
            return

        container.register_singleton("database", get_database())
        container.register_singleton("item_collection", get_item_collection())
