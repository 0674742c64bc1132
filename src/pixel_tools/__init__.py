"""pixel_tools - Resize, re-encode and compress JPEG/PNG images."""

from .config import PixelConfig, get_config, set_config
from .errors import (
    ImageDecodeError,
    ImageFetchError,
    ImageIOError,
    ImageNotFoundError,
    InvalidArgumentError,
    PixelError,
    UnsupportedFormatError,
)
from .pixel import Pixel, change_quality, compress_image, resize_image
from .utils.image_formats import ImageFormat

__version__ = "0.1.0"

__all__ = [
    "Pixel",
    "resize_image",
    "change_quality",
    "compress_image",
    "PixelConfig",
    "get_config",
    "set_config",
    "ImageFormat",
    "PixelError",
    "InvalidArgumentError",
    "ImageNotFoundError",
    "UnsupportedFormatError",
    "ImageDecodeError",
    "ImageIOError",
    "ImageFetchError",
    "__version__",
]
