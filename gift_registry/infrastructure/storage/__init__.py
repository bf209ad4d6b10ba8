from .photo_storage import PhotoStorage, ALLOWED_EXTENSIONS

__all__ = ["PhotoStorage", "ALLOWED_EXTENSIONS"]
