import re
from enum import StrEnum
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse


class ImageFormat(StrEnum):
    JPEG = "jpeg"
    PNG = "png"

    @classmethod
    def from_extension(cls, extension: str) -> "ImageFormat | None":
        ext = extension.lower().lstrip(".")
        if ext in ("jpg", "jpeg"):
            return ImageFormat.JPEG
        elif ext == "png":
            return ImageFormat.PNG
        else:
            return None


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    format_map = {
        "jpg": "JPEG",
        "jpeg": "JPEG",
        "png": "PNG",
    }
    return format_map.get(format_str.lower(), format_str.upper())


_URL_PATTERN = re.compile(
    r"^http[s]?:\/\/(?:[a-zA-Z0-9\-._~:/?#[\]@!$&\'()*+,;=]|%[0-9a-fA-F][0-9a-fA-F])+$"
)


def is_url(locator: str) -> bool:
    if "\n" in locator or "\r" in locator:
        return False
    return bool(_URL_PATTERN.match(locator.strip()))


def image_extension(locator: str) -> str:
    """Lower-cased extension of a path or URL, without the leading dot.

    For URLs only the path component counts, so query strings and fragments
    are ignored. A dotfile such as ``.png`` has the extension ``png``.
    """
    if is_url(locator):
        name = PurePosixPath(urlparse(locator.strip()).path).name
    else:
        name = Path(locator).name
    _, dot, extension = name.rpartition(".")
    return extension.lower() if dot else ""
