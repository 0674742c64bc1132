"""Stateless image operations: resize, change quality, compress.

Each call loads the source (local path or http(s) URL), transforms it,
writes exactly one output file and releases its images before returning.
Failures are raised as ``PixelError`` subclasses; nothing is retried.
"""

import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from .algo import image_change_quality, image_compress, image_resize
from .config import PixelConfig
from .errors import InvalidArgumentError
from .schemas import ChangeQualityParams, CompressParams, ImageOperationParams, ResizeParams
from .utils.image_formats import ImageFormat, image_extension

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound=ImageOperationParams)


def _validate(schema: type[ParamsT], **values: Any) -> ParamsT:
    """Build a params model, turning pydantic errors into InvalidArgumentError."""
    try:
        return schema.model_validate(values)
    except ValidationError as e:
        messages = [str(err["msg"]).removeprefix("Value error, ") for err in e.errors()]
        raise InvalidArgumentError(" ".join(messages)) from e


class Pixel:
    """Static image utility.

    Examples:
        >>> Pixel.resize_image("in.jpg", "out/thumb.jpg", 100, 50, True)
        True
        >>> Pixel.compress_image("https://example.com/logo.png", "logo.png")
        True
    """

    @staticmethod
    def resize_image(
        image_path: str | Path,
        resized_image_path: str | Path,
        new_width: int,
        new_height: int,
        create_path_if_not_exists: bool = False,
        *,
        config: PixelConfig | None = None,
    ) -> bool:
        """Resize an image to exactly ``new_width`` x ``new_height`` and save it.

        The output is always JPEG at quality 100.

        Args:
            image_path: URL or file path of the original image
            resized_image_path: Path to save the resized image
            new_width: Desired width, > 0
            new_height: Desired height, > 0
            create_path_if_not_exists: Create the output directory if missing
            config: Optional settings overriding the process default

        Returns:
            True on success

        Raises:
            InvalidArgumentError: Non-positive dimensions
            ImageNotFoundError: Local source does not exist
            ImageDecodeError: Source could not be decoded
            ImageIOError: Output could not be written
        """
        params = _validate(
            ResizeParams,
            image_path=os.fspath(image_path),
            output_path=os.fspath(resized_image_path),
            width=new_width,
            height=new_height,
            create_path_if_not_exists=create_path_if_not_exists,
        )

        _ = image_resize(
            input_path=params.image_path,
            output_path=params.output_path,
            width=params.width,
            height=params.height,
            create_dirs=params.create_path_if_not_exists,
            config=config,
        )
        logger.info(f"Resized {params.image_path} to {params.width}x{params.height}")
        return True

    @staticmethod
    def change_quality(
        image_path: str | Path,
        new_image_path: str | Path,
        quality: int,
        create_path_if_not_exists: bool = False,
        *,
        config: PixelConfig | None = None,
    ) -> bool:
        """Re-encode a JPEG or PNG image at ``quality`` and save it.

        ``quality`` is 0-100 for JPEG output and a compression level 0-9 for
        PNG output. The 0-9 range is checked against the *source*
        extension, so a PNG source converted to JPEG still rejects
        qualities above 9.

        Returns:
            True on success

        Raises:
            InvalidArgumentError: Quality out of range
            ImageNotFoundError: Local source does not exist
            UnsupportedFormatError: Source or destination extension not jpg/jpeg/png
            ImageDecodeError: Source could not be decoded
            ImageIOError: Output could not be written
        """
        params = _validate(
            ChangeQualityParams,
            image_path=os.fspath(image_path),
            output_path=os.fspath(new_image_path),
            quality=quality,
            create_path_if_not_exists=create_path_if_not_exists,
        )

        if (
            params.source_extension == "png"
            and ImageFormat.from_extension(image_extension(params.output_path)) is ImageFormat.JPEG
        ):
            logger.warning(
                f"PNG range (0-9) applied to JPEG quality for {params.output_path} "
                + "because the source is a PNG"
            )

        _ = image_change_quality(
            input_path=params.image_path,
            output_path=params.output_path,
            quality=params.quality,
            create_dirs=params.create_path_if_not_exists,
            config=config,
        )
        logger.info(f"Re-encoded {params.image_path} at quality {params.quality}")
        return True

    @staticmethod
    def compress_image(
        image_path: str | Path,
        compressed_image_path: str | Path,
        compression_level: int = 9,
        create_path_if_not_exists: bool = False,
        *,
        config: PixelConfig | None = None,
    ) -> bool:
        """Lower the file size of a JPEG or PNG image without lowering its quality.

        JPEG output is written at quality 100; PNG output uses
        ``compression_level`` (0-9).

        Returns:
            True on success

        Raises:
            InvalidArgumentError: Compression level out of range
            ImageNotFoundError: Local source does not exist
            UnsupportedFormatError: Source or destination extension not jpg/jpeg/png
            ImageDecodeError: Source could not be decoded
            ImageIOError: Output could not be written
        """
        params = _validate(
            CompressParams,
            image_path=os.fspath(image_path),
            output_path=os.fspath(compressed_image_path),
            compression_level=compression_level,
            create_path_if_not_exists=create_path_if_not_exists,
        )

        _ = image_compress(
            input_path=params.image_path,
            output_path=params.output_path,
            compression_level=params.compression_level,
            create_dirs=params.create_path_if_not_exists,
            config=config,
        )
        logger.info(f"Compressed {params.image_path} into {params.output_path}")
        return True


resize_image = Pixel.resize_image
change_quality = Pixel.change_quality
compress_image = Pixel.compress_image
