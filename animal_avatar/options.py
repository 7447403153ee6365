"""Render option parsing.

Converts raw query values into a validated :class:`RenderOptions`. Every
rejection is a :class:`ValidationError` raised before any rendering work
starts.
"""

from dataclasses import dataclass
from typing import Optional, Union

from animal_avatar.errors import ValidationError
from animal_avatar.types import ImageFormat


DEFAULT_RASTER_SIZE = 128
MIN_RASTER_SIZE = 100
MAX_RASTER_SIZE = 1000

MIME_TYPES = {
    ImageFormat.SVG: "image/svg+xml; charset=utf-8",
    ImageFormat.PNG: "image/png",
    ImageFormat.WEBP: "image/webp",
}


@dataclass(frozen=True)
class RenderOptions:
    """Validated rendering options.

    Attributes:
        image_format: Output format.
        size: Raster edge length in pixels; ``None`` for SVG. Raster formats
            without a size get ``DEFAULT_RASTER_SIZE``.
        with_background: Whether to draw the background layer.
    """

    image_format: ImageFormat = ImageFormat.SVG
    size: Optional[int] = None
    with_background: bool = False

    def __post_init__(self) -> None:
        if self.image_format != ImageFormat.SVG and self.size is None:
            object.__setattr__(self, "size", DEFAULT_RASTER_SIZE)

    @property
    def mime_type(self) -> str:
        return MIME_TYPES[self.image_format]


def parse_format(value: Optional[str]) -> ImageFormat:
    """Missing or empty means SVG; otherwise one of svg, png, webp."""
    if value is None or value == "":
        return ImageFormat.SVG
    try:
        return ImageFormat(value.lower())
    except ValueError as exc:
        raise ValidationError("Valid formats are 'svg', 'png', or 'webp'") from exc


def parse_size(value: Union[str, int, None]) -> int:
    """Missing means ``DEFAULT_RASTER_SIZE``; out-of-range is rejected."""
    if value is None or value == "":
        return DEFAULT_RASTER_SIZE
    message = (
        f"size must be an integer between {MIN_RASTER_SIZE} and {MAX_RASTER_SIZE}"
    )
    if isinstance(value, bool):
        raise ValidationError(message)
    try:
        size = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(message) from exc
    if not MIN_RASTER_SIZE <= size <= MAX_RASTER_SIZE:
        raise ValidationError(message)
    return size


def parse_background(value: Union[str, bool, None]) -> bool:
    if isinstance(value, bool):
        return value
    return value is not None and value.lower() == "true"


def parse_render_options(
    format: Optional[str] = None,
    size: Union[str, int, None] = None,
    background: Union[str, bool, None] = None,
) -> RenderOptions:
    """Validate raw request values.

    ``size`` is only read for raster formats; an SVG request ignores it.
    """
    image_format = parse_format(format)
    raster_size = None if image_format == ImageFormat.SVG else parse_size(size)
    return RenderOptions(
        image_format=image_format,
        size=raster_size,
        with_background=parse_background(background),
    )
