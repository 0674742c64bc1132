"""Runtime configuration for pixel_tools."""

from pydantic import BaseModel, Field


class PixelConfig(BaseModel):
    """Settings shared by all image operations.

    Attributes:
        fetch_timeout: Seconds to wait on a remote source before giving up
        follow_redirects: Follow HTTP redirects when fetching a remote source
        user_agent: User-Agent header sent with remote fetches
        dir_mode: Permission bits for directories created on demand
    """

    fetch_timeout: float = Field(default=300.0, gt=0, description="Remote fetch timeout (s)")
    follow_redirects: bool = True
    user_agent: str = "pixel-tools/0.1.0"
    dir_mode: int = Field(default=0o777, ge=0, le=0o777)


_default_config: PixelConfig | None = None


def get_config() -> PixelConfig:
    """Get the process-wide default configuration.

    Returns:
        PixelConfig instance
    """
    global _default_config
    if _default_config is None:
        _default_config = PixelConfig()
    return _default_config


def set_config(config: PixelConfig | None) -> None:
    """Replace the process-wide default configuration (None restores defaults)."""
    global _default_config
    _default_config = config
