from .item_repository import ItemRepository

__all__ = ["ItemRepository"]
