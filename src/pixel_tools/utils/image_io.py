"""Image loading and saving for local paths and remote URLs.

Decoding and encoding are delegated to Pillow; remote sources are fetched
with httpx. Every Pillow or transport failure is re-raised as a
``PixelError`` subclass so callers only deal with one error family.
"""

import logging
from collections.abc import Sequence
from io import BytesIO
from pathlib import Path

import httpx
from PIL import Image

from ..config import PixelConfig, get_config
from ..errors import (
    ImageDecodeError,
    ImageFetchError,
    ImageIOError,
    ImageNotFoundError,
    UnsupportedFormatError,
)
from .image_formats import ImageFormat, get_pil_format, image_extension, is_url

logger = logging.getLogger(__name__)

# Modes each encoder writes without conversion
ENCODER_MODES = {
    ImageFormat.JPEG: ("1", "L", "RGB", "CMYK"),
    ImageFormat.PNG: ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"),
}


def fetch_bytes(url: str, config: PixelConfig | None = None) -> bytes:
    """Download a remote image.

    Args:
        url: http(s) URL of the image
        config: Settings for timeout, redirects and User-Agent

    Returns:
        Raw response body

    Raises:
        ImageFetchError: On transport errors or a non-2xx response
    """
    config = config or get_config()
    logger.info(f"Fetching image from {url}")

    try:
        response = httpx.get(
            url,
            follow_redirects=config.follow_redirects,
            timeout=config.fetch_timeout,
            headers={"User-Agent": config.user_agent},
        )
        _ = response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch image from {url}: {e}")
        raise ImageFetchError(f"Failed to fetch image from {url}: {e}") from e

    return response.content


def _require_local_file(path: Path) -> None:
    if not path.exists():
        raise ImageNotFoundError(f"Original image file not found: {path}")


def load_image(
    locator: str,
    formats: Sequence[str] | None = None,
    config: PixelConfig | None = None,
) -> Image.Image:
    """Load and fully decode an image from a local path or URL.

    Remote content is always auto-detected. For local paths, ``formats``
    restricts which Pillow decoders are tried (e.g. ``["JPEG"]``).

    The caller owns the returned image and must close it.

    Raises:
        ImageNotFoundError: Local path does not exist
        ImageFetchError: Remote source could not be downloaded
        ImageDecodeError: Data is not a decodable image of the expected format
    """
    source: Path | BytesIO
    if is_url(locator):
        source = BytesIO(fetch_bytes(locator, config=config))
        formats = None
    else:
        source = Path(locator)
        _require_local_file(source)

    try:
        img = Image.open(source, formats=list(formats) if formats else None)
    except OSError as e:
        raise ImageDecodeError(
            f"Failed to create image from the original file or URL: {locator}"
        ) from e

    try:
        img.load()
    except (OSError, SyntaxError) as e:
        img.close()
        raise ImageDecodeError(f"Failed to decode image data: {locator}") from e

    logger.debug(f"Loaded {img.format} image {img.size[0]}x{img.size[1]} from {locator}")
    return img


def load_image_by_extension(locator: str, config: PixelConfig | None = None) -> Image.Image:
    """Load an image choosing the decoder from the source extension.

    URLs are auto-detected. Local ``jpg``/``jpeg`` files use the JPEG
    decoder and ``png`` files the PNG decoder.

    Raises:
        ImageNotFoundError: Local path does not exist
        UnsupportedFormatError: Local extension is not jpg, jpeg or png
        ImageFetchError: Remote source could not be downloaded
        ImageDecodeError: Data could not be decoded
    """
    if is_url(locator):
        return load_image(locator, config=config)

    _require_local_file(Path(locator))

    fmt = ImageFormat.from_extension(image_extension(locator))
    if fmt is None:
        raise UnsupportedFormatError(f"Unsupported image format: {locator}")

    return load_image(locator, formats=[get_pil_format(fmt)], config=config)


def ensure_output_dir(output_path: str | Path, create: bool, mode: int = 0o777) -> bool:
    """Create the parent directory of ``output_path`` if missing and allowed.

    A missing directory that may not be created is left alone; the write in
    ``save_image`` reports it.

    Returns:
        True if the directory exists afterwards
    """
    directory = Path(output_path).parent
    if directory.is_dir():
        return True
    if not create:
        return False

    logger.info(f"Creating output directory: {directory}")
    try:
        directory.mkdir(mode=mode, parents=True, exist_ok=True)
    except OSError as e:
        raise ImageIOError(f"Failed to create output directory {directory}: {e}") from e
    return True


def save_image(
    image: Image.Image,
    output_path: str | Path,
    fmt: ImageFormat,
    **options: object,
) -> str:
    """Encode ``image`` as ``fmt`` and write it to ``output_path``.

    The image is encoded in memory first, so a failed encode never leaves
    a partial file behind.

    Args:
        image: Decoded image, left open for the caller to close
        output_path: Destination file
        fmt: Output encoding, independent of the destination extension
        **options: Pillow save options (``quality``, ``compress_level``)

    Returns:
        Output file path as string

    Raises:
        ImageIOError: Destination directory missing, encode or write failure
    """
    output_path = Path(output_path)
    if not output_path.parent.is_dir():
        raise ImageIOError(f"Output directory does not exist: {output_path.parent}")

    # JPEG does not support alpha channel, PNG does not support CMYK
    converted: Image.Image | None = None
    if image.mode not in ENCODER_MODES[fmt]:
        keep_alpha = fmt is ImageFormat.PNG and "A" in image.mode.upper()
        converted = image.convert("RGBA" if keep_alpha else "RGB")
    target = converted if converted is not None else image

    buffer = BytesIO()
    try:
        target.save(buffer, format=get_pil_format(fmt), **options)
    except (OSError, ValueError) as e:
        raise ImageIOError(f"Failed to encode {fmt} image for {output_path}: {e}") from e
    finally:
        if converted is not None:
            converted.close()

    try:
        _ = output_path.write_bytes(buffer.getvalue())
    except OSError as e:
        raise ImageIOError(f"Failed to write image to {output_path}: {e}") from e

    logger.info(f"Wrote {fmt} image to {output_path} ({buffer.tell()} bytes)")
    return str(output_path)
