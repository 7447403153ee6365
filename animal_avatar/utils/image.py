"""Pillow helpers for the raster stage."""

import io

from PIL import Image

from animal_avatar.types import ImageFormat


_PIL_FORMATS = {
    ImageFormat.PNG: "PNG",
    ImageFormat.WEBP: "WEBP",
}


def center_on_canvas(image: Image.Image, size: int) -> Image.Image:
    """Return ``image`` centered on a transparent ``size`` x ``size`` canvas.

    Images that already match the canvas are returned unchanged.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    if image.size == (size, size):
        return image
    canvas = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    x0 = (size - image.width) // 2
    y0 = (size - image.height) // 2
    canvas.alpha_composite(image, (max(0, x0), max(0, y0)))
    return canvas


def encode_image(image: Image.Image, image_format: ImageFormat) -> bytes:
    """Encode ``image`` as PNG or lossless WEBP."""
    if image_format not in _PIL_FORMATS:
        raise ValueError(f"Not a raster format: {image_format}")
    buffer = io.BytesIO()
    if image_format == ImageFormat.WEBP:
        image.save(buffer, format="WEBP", lossless=True)
    else:
        image.save(buffer, format="PNG")
    return buffer.getvalue()
