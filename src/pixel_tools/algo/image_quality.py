"""Re-encode an image at a target quality (single file)."""

from pathlib import Path

from ..config import PixelConfig, get_config
from ..errors import InvalidArgumentError, UnsupportedFormatError
from ..schemas import PNG_LEVEL_RANGE
from ..utils.image_formats import ImageFormat, image_extension
from ..utils.image_io import ensure_output_dir, load_image_by_extension, save_image
from ..utils.profiling import timed


def png_compression_level(level: int) -> int:
    """Check a zlib compression level before handing it to the PNG encoder."""
    if level not in PNG_LEVEL_RANGE:
        raise InvalidArgumentError(
            f"PNG compression level must be between 0 and 9, got {level}."
        )
    return level


@timed
def image_change_quality(
    *,
    input_path: str,
    output_path: str | Path,
    quality: int,
    create_dirs: bool = False,
    config: PixelConfig | None = None,
) -> str:
    """
    Re-encode a single image in the destination's format at ``quality``.

    Args:
        input_path: Local path or URL of the input image
        output_path: Path to output image (.jpg, .jpeg or .png)
        quality: JPEG quality (0-100), or PNG compression level (0-9)
        create_dirs: Create the output directory if it is missing
        config: Fetch and directory settings

    Returns:
        Output file path as string

    Raises:
        ImageNotFoundError: If a local input image does not exist
        UnsupportedFormatError: If the input or output extension is not supported
        ImageDecodeError: If the input is not a decodable image
        InvalidArgumentError: If ``quality`` is not a valid PNG level for PNG output
        ImageIOError: If the output cannot be written
    """
    config = config or get_config()

    with load_image_by_extension(input_path, config=config) as original:
        _ = ensure_output_dir(output_path, create=create_dirs, mode=config.dir_mode)

        # Save the new image based on its type
        fmt = ImageFormat.from_extension(image_extension(str(output_path)))
        if fmt is ImageFormat.JPEG:
            return save_image(original, output_path, fmt, quality=quality)
        elif fmt is ImageFormat.PNG:
            return save_image(
                original, output_path, fmt, compress_level=png_compression_level(quality)
            )
        else:
            raise UnsupportedFormatError(
                f"Unsupported image format for saving the new image: {output_path}"
            )
