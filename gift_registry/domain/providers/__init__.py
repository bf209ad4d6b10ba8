from .image_analysis_provider import ImageAnalysisProvider

__all__ = ["ImageAnalysisProvider"]
