"""Pydantic schemas for image operation parameters."""

from pydantic import BaseModel, Field, field_validator, model_validator

from .utils.image_formats import image_extension

DIMENSIONS_MESSAGE = "Image dimensions must be greater than zero."
QUALITY_MESSAGE = (
    "Invalid quality level. The quality parameter should be between 0 and 100 for JPEG, "
    + "and between 0 and 9 for PNG."
)
COMPRESSION_MESSAGE = (
    "Invalid compression level. The compression parameter should be between 0 and 9 for PNG."
)

PNG_LEVEL_RANGE = range(0, 10)
JPEG_QUALITY_RANGE = range(0, 101)


class ImageOperationParams(BaseModel):
    """Fields shared by every image operation.

    Attributes:
        image_path: Local path or http(s) URL of the source image
        output_path: Destination file; its extension selects the encoder
        create_path_if_not_exists: Create the destination directory if missing
    """

    image_path: str = Field(min_length=1, description="Source path or URL")
    output_path: str = Field(min_length=1, description="Destination file path")
    create_path_if_not_exists: bool = False

    @property
    def source_extension(self) -> str:
        return image_extension(self.image_path)


class ResizeParams(ImageOperationParams):
    """Parameters for resizing to exact pixel dimensions."""

    width: int
    height: int

    @field_validator("width", "height")
    @classmethod
    def validate_dimensions(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(DIMENSIONS_MESSAGE)
        return v


class ChangeQualityParams(ImageOperationParams):
    """Parameters for re-encoding at a given quality.

    ``quality`` is a JPEG quality (0-100) or a PNG compression level (0-9)
    depending on the destination format. The PNG range is enforced when the
    *source* is a PNG, whatever the destination.
    """

    quality: int

    @model_validator(mode="after")
    def validate_quality(self) -> "ChangeQualityParams":
        if self.quality not in JPEG_QUALITY_RANGE:
            raise ValueError(QUALITY_MESSAGE)
        if self.source_extension == "png" and self.quality not in PNG_LEVEL_RANGE:
            raise ValueError(QUALITY_MESSAGE)
        return self


class CompressParams(ImageOperationParams):
    """Parameters for size-reducing re-encoding.

    ``compression_level`` only applies to PNG output and is only validated
    when the source is a PNG.
    """

    compression_level: int = 9

    @model_validator(mode="after")
    def validate_compression_level(self) -> "CompressParams":
        if self.source_extension == "png" and self.compression_level not in PNG_LEVEL_RANGE:
            raise ValueError(COMPRESSION_MESSAGE)
        return self
