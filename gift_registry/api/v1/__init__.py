from .item_controller import router as item_router


__all__ = ["item_router"]
