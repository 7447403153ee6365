"""Selectable asset.

An ``Asset`` is one SVG drawing belonging to exactly one layer. Its
``slots`` name literal colors inside ``content`` that are replaced by the
digest-derived colors when composing; everything else in the drawing keeps
its authored color.
"""

from dataclasses import dataclass
from typing import Mapping

from pyrsistent import PMap, pmap

from animal_avatar.models.color import Color
from animal_avatar.types import AssetIdentifier, ColorName
from animal_avatar.utils.svg import substitute_colors


@dataclass(frozen=True)
class Asset:
    """Loaded asset.

    Attributes:
        category: Layer the asset belongs to (an accessory category or ``body``).
        identifier: Stable name reported by stats (the file stem).
        content: Inner SVG markup, without the root ``<svg>`` element.
        slots: Color category to the default ``#rrggbb`` used in ``content``.
    """

    category: str
    identifier: AssetIdentifier
    content: str
    slots: PMap[ColorName, str] = pmap()

    def render(self, colors: Mapping[ColorName, Color]) -> str:
        """Return ``content`` with every slot recolored from ``colors``."""
        replacements = {
            default: colors[color_name].to_html()
            for color_name, default in sorted(self.slots.items())
        }
        return substitute_colors(self.content, replacements)
