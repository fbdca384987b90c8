"""Exceptions raised by the design bible toolkit."""


class DesignBibleError(Exception):
    """Base error for designbible."""
    pass


class DesignBibleNotFound(DesignBibleError, FileNotFoundError):
    """The design bible document does not exist."""
    pass


class ImageGenerationError(DesignBibleError, RuntimeError):
    """Gemini did not return a usable image."""
    pass
