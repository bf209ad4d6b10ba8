from .google_vision_client import GoogleVisionClient

__all__ = ["GoogleVisionClient"]
