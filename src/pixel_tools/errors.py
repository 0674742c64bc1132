"""Exceptions raised by pixel_tools operations."""


class PixelError(Exception):
    """Base class for every error raised by pixel_tools."""

    def __init__(self, message: str = "Image operation failed."):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(PixelError, ValueError):
    """Non-positive dimensions or an out-of-range quality/compression value."""


class ImageNotFoundError(PixelError, FileNotFoundError):
    """The local source image does not exist."""


class UnsupportedFormatError(PixelError, ValueError):
    """Source or destination extension is not jpg, jpeg or png."""


class ImageDecodeError(PixelError, OSError):
    """The source data could not be decoded into an image."""


class ImageIOError(PixelError, OSError):
    """The destination could not be written."""


class ImageFetchError(ImageIOError):
    """A remote source could not be downloaded."""
