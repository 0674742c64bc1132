"""Pure image resize computation logic (single file)."""

from pathlib import Path

from PIL import Image

from ..config import PixelConfig, get_config
from ..utils.image_formats import ImageFormat, is_url
from ..utils.image_io import ensure_output_dir, load_image, save_image
from ..utils.profiling import timed

JPEG_MAX_QUALITY = 100


@timed
def image_resize(
    *,
    input_path: str,
    output_path: str | Path,
    width: int,
    height: int,
    create_dirs: bool = False,
    config: PixelConfig | None = None,
) -> str:
    """
    Resample a single image to exact dimensions and write it as JPEG.

    Local sources are decoded as JPEG; URL sources are auto-detected. The
    whole source is scaled onto a new ``width`` x ``height`` RGB canvas with
    Lanczos resampling (no cropping, aspect ratio is not preserved). Output
    is always JPEG at quality 100, whatever the destination extension.

    Args:
        input_path: Local path or URL of the input image
        output_path: Path to output image
        width: Target width, already validated > 0
        height: Target height, already validated > 0
        create_dirs: Create the output directory if it is missing
        config: Fetch and directory settings

    Returns:
        Output file path as string

    Raises:
        ImageNotFoundError: If a local input image does not exist
        ImageDecodeError: If the input is not a decodable image
        ImageIOError: If the output cannot be written
    """
    config = config or get_config()
    formats = None if is_url(input_path) else ["JPEG"]

    with load_image(input_path, formats=formats, config=config) as original:
        _ = ensure_output_dir(output_path, create=create_dirs, mode=config.dir_mode)

        canvas = original if original.mode == "RGB" else original.convert("RGB")
        resized = canvas.resize((width, height), Image.Resampling.LANCZOS)
        try:
            return save_image(resized, output_path, ImageFormat.JPEG, quality=JPEG_MAX_QUALITY)
        finally:
            resized.close()
            if canvas is not original:
                canvas.close()
