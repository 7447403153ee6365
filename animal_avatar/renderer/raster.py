"""SVG to PNG/WEBP conversion.

CairoSVG rasterizes the document at a size proportional to its viewBox with
the longer edge equal to the requested size; Pillow centers the result on a
transparent square canvas and encodes it. Size bounds are enforced by the
options layer before this point and are never clamped here.
"""

import io
import logging
from typing import Tuple

import cairosvg
from PIL import Image

from animal_avatar.errors import RenderError
from animal_avatar.types import ImageFormat
from animal_avatar.utils.image import center_on_canvas, encode_image
from animal_avatar.utils.svg import parse_root, parse_view_box


logger = logging.getLogger(__name__)

RASTER_FORMATS = (ImageFormat.PNG, ImageFormat.WEBP)


def _fit(width: float, height: float, size: int) -> Tuple[int, int]:
    """Scale ``width`` x ``height`` so the longer edge equals ``size``."""
    scale = size / max(width, height)
    return max(1, round(width * scale)), max(1, round(height * scale))


def rasterize(svg: bytes, image_format: ImageFormat, size: int) -> bytes:
    """Convert an SVG document to a ``size`` x ``size`` raster image.

    Arguments:
        svg: UTF-8 SVG document.
        image_format: ``ImageFormat.PNG`` or ``ImageFormat.WEBP``.
        size: Edge length in pixels, already validated by the caller.

    Returns:
        bytes: Encoded image.

    Raises:
        RenderError: If the document cannot be parsed or rendered, or the
            image cannot be allocated or encoded.
    """
    if image_format not in RASTER_FORMATS:
        raise ValueError(f"Not a raster format: {image_format}")
    if size <= 0:
        raise ValueError(f"Raster size must be positive, got {size}")

    try:
        _, _, width, height = parse_view_box(parse_root(svg.decode("utf-8")))
        out_width, out_height = _fit(width, height, size)
        png = cairosvg.svg2png(
            bytestring=svg, output_width=out_width, output_height=out_height
        )
        with Image.open(io.BytesIO(png)) as rendered:
            image = center_on_canvas(rendered.convert("RGBA"), size)
        return encode_image(image, image_format)
    except MemoryError as exc:
        raise RenderError(f"Out of memory rendering {size}px {image_format}") from exc
    except Exception as exc:
        raise RenderError(f"Failed to render {image_format}: {exc}") from exc


class RasterConverter:
    def convert(self, svg: bytes, image_format: ImageFormat, size: int) -> bytes:
        return rasterize(svg, image_format, size)
