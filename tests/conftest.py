"""Test configuration and fixtures for pixel_tools.

This module provides:
- Sample JPEG/PNG inputs generated with Pillow in a temp dir
- Encoded image bytes for serving from a mocked httpx
- Reset of the process-wide PixelConfig between tests
"""

from collections.abc import Callable, Iterator
from io import BytesIO
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest
from PIL import Image, ImageDraw

from pixel_tools.config import set_config

REMOTE_URL = "https://images.example.com/photos/sample.png"


def make_image(width: int = 320, height: int = 240, mode: str = "RGB") -> Image.Image:
    """Build a gradient with a few shapes so encoders have real content to work on."""
    vertical = Image.linear_gradient("L").resize((width, height))
    horizontal = Image.linear_gradient("L").transpose(Image.Transpose.ROTATE_90).resize(
        (width, height)
    )
    bands = [vertical, horizontal, Image.new("L", (width, height), 128)]
    if mode == "RGBA":
        bands.append(horizontal)
    img = Image.merge(mode, bands)

    draw = ImageDraw.Draw(img)
    draw.ellipse((width // 8, height // 8, width // 2, height // 2), fill="red")
    draw.rectangle((width // 2, height // 2, width - 10, height - 10), outline="blue", width=3)
    return img


def encode(img: Image.Image, format: str) -> bytes:
    buffer = BytesIO()
    img.save(buffer, format=format)
    return buffer.getvalue()


def http_response(content: bytes, status_code: int = 200, url: str = REMOTE_URL) -> httpx.Response:
    return httpx.Response(status_code, content=content, request=httpx.Request("GET", url))


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_config() -> Iterator[None]:
    """Restore the default PixelConfig after every test."""
    yield
    set_config(None)


@pytest.fixture
def image_factory() -> Callable[..., Image.Image]:
    return make_image


@pytest.fixture
def sample_jpeg(tmp_path: Path) -> Path:
    """A 320x240 RGB JPEG on disk."""
    path = tmp_path / "input.jpg"
    make_image().save(path, "JPEG", quality=95)
    return path


@pytest.fixture
def sample_png(tmp_path: Path) -> Path:
    """A 320x240 RGBA PNG on disk."""
    path = tmp_path / "input.png"
    make_image(mode="RGBA").save(path, "PNG")
    return path


@pytest.fixture
def png_bytes() -> bytes:
    return encode(make_image(mode="RGBA"), "PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return encode(make_image(), "JPEG")


@pytest.fixture
def mock_httpx_get() -> Iterator[MagicMock]:
    """Patch httpx.get as used by the image loader."""
    with patch("pixel_tools.utils.image_io.httpx.get") as mock_get:
        yield mock_get


@pytest.fixture
def remote_url() -> str:
    return REMOTE_URL


@pytest.fixture
def serve_bytes(mock_httpx_get: MagicMock) -> Callable[..., MagicMock]:
    """Make the mocked httpx.get answer with ``content`` and ``status_code``."""

    def _serve(content: bytes, status_code: int = 200) -> MagicMock:
        mock_httpx_get.return_value = http_response(content, status_code)
        return mock_httpx_get

    return _serve
