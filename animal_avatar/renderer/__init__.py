"""Rendering subpackage.

Turns a selection into image bytes in two stages:

* :mod:`animal_avatar.renderer.svg` stacks the selected layers into one
  deterministic SVG document.
* :mod:`animal_avatar.renderer.raster` rasterizes that document to PNG or
  WEBP with CairoSVG and Pillow.

Both stages are pure functions of their inputs and safe to call from any
number of threads.
"""

from .raster import RasterConverter, rasterize
from .svg import LAYER_ORDER, SVGComposer, compose_svg

__all__ = [
    "LAYER_ORDER",
    "RasterConverter",
    "SVGComposer",
    "compose_svg",
    "rasterize",
]
