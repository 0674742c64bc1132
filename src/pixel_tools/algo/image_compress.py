"""Visually lossless re-encoding to reduce file size (single file)."""

from pathlib import Path

from ..config import PixelConfig, get_config
from ..errors import UnsupportedFormatError
from ..utils.image_formats import ImageFormat, image_extension
from ..utils.image_io import ensure_output_dir, load_image_by_extension, save_image
from ..utils.profiling import timed
from .image_quality import png_compression_level
from .image_resize import JPEG_MAX_QUALITY


@timed
def image_compress(
    *,
    input_path: str,
    output_path: str | Path,
    compression_level: int = 9,
    create_dirs: bool = False,
    config: PixelConfig | None = None,
) -> str:
    """
    Re-encode a single image to reduce its size without visible loss.

    JPEG output is written at quality 100 and ignores ``compression_level``;
    PNG output uses ``compression_level`` as the zlib level.

    Args:
        input_path: Local path or URL of the input image
        output_path: Path to output image (.jpg, .jpeg or .png)
        compression_level: PNG compression level (0-9)
        create_dirs: Create the output directory if it is missing
        config: Fetch and directory settings

    Returns:
        Output file path as string

    Raises:
        ImageNotFoundError: If a local input image does not exist
        UnsupportedFormatError: If the input or output extension is not supported
        ImageDecodeError: If the input is not a decodable image
        InvalidArgumentError: If ``compression_level`` is out of range for PNG output
        ImageIOError: If the output cannot be written
    """
    config = config or get_config()

    with load_image_by_extension(input_path, config=config) as original:
        _ = ensure_output_dir(output_path, create=create_dirs, mode=config.dir_mode)

        fmt = ImageFormat.from_extension(image_extension(str(output_path)))
        if fmt is ImageFormat.JPEG:
            return save_image(original, output_path, fmt, quality=JPEG_MAX_QUALITY)
        elif fmt is ImageFormat.PNG:
            return save_image(
                original,
                output_path,
                fmt,
                compress_level=png_compression_level(compression_level),
            )
        else:
            raise UnsupportedFormatError(
                f"Unsupported image format for saving the compressed image: {output_path}"
            )
