from typing import Optional


class SlideStudioError(Exception):
    """Base exception for slide studio failures"""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self):
        return self.message


class ImageProviderError(SlideStudioError):
    """Image provider is not configured or the call failed"""

    def __init__(self, message: str, provider: str = "", original_error: Optional[Exception] = None):
        super().__init__(message, original_error=original_error)
        self.provider = provider


class NoImageDataError(ImageProviderError):
    """Provider responded without any image payload"""
    pass


class SlideStorageError(SlideStudioError):
    """Writing a generated slide to disk failed"""
    pass


class ComposerQueueFullError(SlideStudioError):
    """More slide ideas than the composer queue accepts"""
    pass
