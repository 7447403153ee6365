"""Authoring tables for the built-in catalog.

Paths are relative to the asset root. Category lists are kept in
alphabetical order. Both the length of a list and the position of each
asset in it are part of the digest-to-image mapping: any edit here changes
existing animals and needs a new selection layout version.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from animal_avatar.types import Address, CategoryName, ColorName


CANVAS_SIZE = 256
CANVAS_VIEW_BOX = (0.0, 0.0, float(CANVAS_SIZE), float(CANVAS_SIZE))

BODY_SLOT_COLOR = "#c8a27a"
ACCENT_SLOT_COLOR = "#e0457b"


@dataclass(frozen=True)
class AssetDefinition:
    """Authoring-time description of one asset file.

    Attributes:
        path: File path relative to the asset root.
        slots: Color category to the literal color used for it in the file.
    """

    path: str
    slots: Dict[ColorName, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CategoryDefinition:
    """Assets of one accessory category and whether "none" may be selected."""

    assets: Tuple[AssetDefinition, ...]
    allow_none: bool = True


@dataclass(frozen=True)
class VanityDefinition:
    """Authoring-time description of one vanity override.

    Attributes:
        path: File path relative to the asset root.
        colors: ``#rrggbb`` per color category, reported by stats.
        background_eligible: Whether a requested background may be drawn.
    """

    path: str
    colors: Dict[ColorName, str]
    background_eligible: bool = True


AssetMap = Dict[CategoryName, CategoryDefinition]
VanityMap = Dict[Address, VanityDefinition]


def _accent(path: str) -> AssetDefinition:
    return AssetDefinition(path, {ColorName.ACCENT: ACCENT_SLOT_COLOR})


BODY_DEFINITION = AssetDefinition("body/animal.svg", {ColorName.BODY: BODY_SLOT_COLOR})

DEFAULT_ASSET_MAP: AssetMap = {
    CategoryName.GLASSES: CategoryDefinition(
        (
            AssetDefinition("glasses/monocle.svg"),
            _accent("glasses/round.svg"),
            _accent("glasses/shades.svg"),
        )
    ),
    CategoryName.HAT: CategoryDefinition(
        (
            _accent("hat/beanie.svg"),
            _accent("hat/cap.svg"),
            _accent("hat/crown.svg"),
            _accent("hat/tophat.svg"),
        )
    ),
    CategoryName.MISC: CategoryDefinition(
        (
            _accent("misc/bowtie.svg"),
            _accent("misc/necklace.svg"),
            _accent("misc/scarf.svg"),
        )
    ),
    CategoryName.MOUTH: CategoryDefinition(
        (
            AssetDefinition("mouth/grin.svg"),
            AssetDefinition("mouth/smile.svg"),
            AssetDefinition("mouth/tongue.svg"),
        ),
        allow_none=False,
    ),
    CategoryName.SHIRT_PANTS: CategoryDefinition(
        (
            _accent("shirt_pants/overalls.svg"),
            _accent("shirt_pants/sweater.svg"),
            _accent("shirt_pants/tshirt.svg"),
        )
    ),
    CategoryName.SHOES: CategoryDefinition(
        (
            AssetDefinition("shoes/boots.svg"),
            _accent("shoes/slippers.svg"),
            _accent("shoes/sneakers.svg"),
        )
    ),
    CategoryName.TAIL_ACCESSORY: CategoryDefinition(
        (
            _accent("tail_accessory/bell.svg"),
            _accent("tail_accessory/bow.svg"),
            _accent("tail_accessory/ribbon.svg"),
        )
    ),
}

DEFAULT_VANITY_MAP: VanityMap = {
    "paw_1pi5su6e5ke7e3tqtmnf3e96y514zrp3w6xj85rjkca4oymywbsrm9sxy6g3": VanityDefinition(
        "vanity/golden.svg",
        {
            ColorName.BACKGROUND: "#fff8e1",
            ColorName.BODY: "#e6b422",
            ColorName.ACCENT: "#ffd700",
        },
    ),
    "paw_33der9wny93ekujnzo9orb81rt9whm1gc4s1iqzx8ti6fgkxmzdg3deb4jrb": VanityDefinition(
        "vanity/robot.svg",
        {
            ColorName.BACKGROUND: "#e4e7eb",
            ColorName.BODY: "#9aa5b1",
            ColorName.ACCENT: "#4ce0b3",
        },
        background_eligible=False,
    ),
}
