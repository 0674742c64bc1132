"""Image resize, quality and compression algorithms."""

from .image_compress import image_compress
from .image_quality import image_change_quality, png_compression_level
from .image_resize import image_resize

__all__ = ["image_change_quality", "image_compress", "image_resize", "png_compression_level"]
