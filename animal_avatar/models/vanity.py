"""Vanity asset.

A pre-designed drawing keyed by account address. Its colors are fixed at
authoring time so stats and the optional background never consult a digest.
"""

from dataclasses import dataclass

from pyrsistent import PMap

from animal_avatar.models.color import Color
from animal_avatar.types import Address, AssetIdentifier, ColorName


@dataclass(frozen=True)
class VanityAsset:
    """Loaded vanity override.

    Attributes:
        address: Normalized account address the override applies to.
        identifier: File stem of the drawing.
        content: Inner SVG markup of the complete animal.
        colors: One fixed color per color category.
        background_eligible: Whether a requested background may be drawn.
    """

    address: Address
    identifier: AssetIdentifier
    content: str
    colors: PMap[ColorName, Color]
    background_eligible: bool = True
