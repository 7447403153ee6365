"""Layered SVG composition.

Layers are stacked bottom to top in ``LAYER_ORDER``. A layer is written as a
``<g id="...">`` group on its own line; layers a selection does not provide
are skipped entirely. The output contains no timestamps, generated ids or
unordered attributes, so identical selections give identical bytes.
"""

from typing import List

from animal_avatar.catalog.definitions import CANVAS_SIZE
from animal_avatar.models import BACKGROUND_LAYER, BODY_LAYER, Selection
from animal_avatar.types import CategoryName
from animal_avatar.utils.svg import SVG_NAMESPACE


LAYER_ORDER = (
    BACKGROUND_LAYER,
    BODY_LAYER,
    CategoryName.SHIRT_PANTS.value,
    CategoryName.TAIL_ACCESSORY.value,
    CategoryName.SHOES.value,
    CategoryName.MOUTH.value,
    CategoryName.MISC.value,
    CategoryName.GLASSES.value,
    CategoryName.HAT.value,
)

SVG_HEADER = (
    f'<svg xmlns="{SVG_NAMESPACE}" width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" '
    f'viewBox="0 0 {CANVAS_SIZE} {CANVAS_SIZE}">'
)
SVG_FOOTER = "</svg>"


def _group(layer: str, content: str) -> str:
    return f'<g id="{layer}">{content}</g>'


def compose_svg(selection: Selection) -> bytes:
    """Render ``selection`` into one UTF-8 SVG document."""
    layers = selection.layers()
    background = selection.background_color

    lines: List[str] = [SVG_HEADER]
    for layer in LAYER_ORDER:
        if layer == BACKGROUND_LAYER:
            if background is not None:
                rect = (
                    f'<rect width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" '
                    f'fill="{background.to_html()}"/>'
                )
                lines.append(_group(layer, rect))
            continue
        content = layers.get(layer)
        if content:
            lines.append(_group(layer, content))
    lines.append(SVG_FOOTER)
    return ("\n".join(lines) + "\n").encode("utf-8")


class SVGComposer:
    def compose(self, selection: Selection) -> bytes:
        return compose_svg(selection)
