"""Digest-to-selection mapping.

Selection layout v1 (big-endian unsigned integers over a 32-byte digest):

==========  ==================  ===========================================
Bytes       Target              Rule
==========  ==================  ===========================================
0-3         glasses             ``v % (n + 1)``, residue ``n`` selects none
4-7         hat                 ``v % (n + 1)``, residue ``n`` selects none
8-11        misc                ``v % (n + 1)``, residue ``n`` selects none
12-15       mouth               ``v % n``, always selected
16-19       shirt_pants         ``v % (n + 1)``, residue ``n`` selects none
20-23       shoes               ``v % (n + 1)``, residue ``n`` selects none
24-27       tail_accessory      ``v % (n + 1)``, residue ``n`` selects none
28-29       background color    hue ``v / 2**16``, s 0.30, v 0.96
30          body color          hue ``v / 2**8``, s 0.45, v 0.85
31          accent color        hue ``v / 2**8``, s 0.75, v 0.92
==========  ==================  ===========================================

``n`` is the number of assets in the category, in catalog order. Four-byte
ranges keep modulo bias below ``n / 2**32`` for every category. Each range
feeds exactly one outcome, so changing bytes of one range never affects
another category.

Existing addresses render from this table. Changing a range, a rule or the
asset lists requires bumping ``SELECTION_LAYOUT_VERSION`` and a migration
plan for live users.
"""

from dataclasses import dataclass
from typing import Dict, Mapping

from pyrsistent import pmap

from animal_avatar.catalog import AssetCatalog
from animal_avatar.models import DIGEST_SIZE, AccessorySet, Color, HashDigest
from animal_avatar.types import CategoryName, ColorName


SELECTION_LAYOUT_VERSION = 1

MIN_CATEGORY_RANGE_WIDTH = 4


@dataclass(frozen=True)
class ByteRange:
    """Half-open slice ``[start, start + width)`` of the digest."""

    start: int
    width: int

    @property
    def stop(self) -> int:
        return self.start + self.width

    def read(self, digest: HashDigest) -> int:
        return int.from_bytes(digest[self.start : self.stop], "big")


@dataclass(frozen=True)
class ColorRule:
    """Hue from a byte range, fixed saturation and value."""

    byte_range: ByteRange
    saturation: float
    value: float

    def derive(self, digest: HashDigest) -> Color:
        hue = self.byte_range.read(digest) / (1 << (8 * self.byte_range.width))
        return Color.from_hsv(hue, self.saturation, self.value)


CATEGORY_RANGES: Dict[CategoryName, ByteRange] = {
    CategoryName.GLASSES: ByteRange(0, 4),
    CategoryName.HAT: ByteRange(4, 4),
    CategoryName.MISC: ByteRange(8, 4),
    CategoryName.MOUTH: ByteRange(12, 4),
    CategoryName.SHIRT_PANTS: ByteRange(16, 4),
    CategoryName.SHOES: ByteRange(20, 4),
    CategoryName.TAIL_ACCESSORY: ByteRange(24, 4),
}

COLOR_RULES: Dict[ColorName, ColorRule] = {
    ColorName.BACKGROUND: ColorRule(ByteRange(28, 2), saturation=0.30, value=0.96),
    ColorName.BODY: ColorRule(ByteRange(30, 1), saturation=0.45, value=0.85),
    ColorName.ACCENT: ColorRule(ByteRange(31, 1), saturation=0.75, value=0.92),
}


def _check_layout() -> None:
    """Ranges must be disjoint and cover the digest exactly."""
    if set(CATEGORY_RANGES) != set(CategoryName):
        raise ValueError("Selection layout must cover every category")
    if set(COLOR_RULES) != set(ColorName):
        raise ValueError("Selection layout must cover every color")
    for name, byte_range in CATEGORY_RANGES.items():
        if byte_range.width < MIN_CATEGORY_RANGE_WIDTH:
            raise ValueError(f"Range for {name} is narrower than 4 bytes")
    ranges = list(CATEGORY_RANGES.values()) + [
        rule.byte_range for rule in COLOR_RULES.values()
    ]
    covered = sorted(i for r in ranges for i in range(r.start, r.stop))
    if covered != list(range(DIGEST_SIZE)):
        raise ValueError("Selection ranges must tile the digest without overlap")


_check_layout()


def selection_indices(
    catalog: AssetCatalog, digest: HashDigest
) -> Mapping[CategoryName, int]:
    """Raw residue per category; ``len(category)`` means none."""
    return {
        name: byte_range.read(digest) % catalog.option_count(name)
        for name, byte_range in CATEGORY_RANGES.items()
    }


def select_accessories(
    catalog: AssetCatalog, digest: HashDigest, with_background: bool = False
) -> AccessorySet:
    """Map ``digest`` to one asset (or none) per category plus colors.

    Arguments:
        catalog: Loaded asset catalog.
        digest: Validated ``DIGEST_SIZE``-byte digest.
        with_background: Carried through to rendering; does not influence
            any index or color.

    Returns:
        AccessorySet: Immutable selection.
    """
    if not isinstance(digest, HashDigest):
        raise TypeError(f"Expected HashDigest, got {type(digest).__name__}")

    assets = {}
    for name, index in selection_indices(catalog, digest).items():
        options = catalog.categories[name]
        assets[name] = options[index] if index < len(options) else None
    colors = {name: rule.derive(digest) for name, rule in COLOR_RULES.items()}
    return AccessorySet(
        body=catalog.body,
        assets=pmap(assets),
        colors=pmap(colors),
        with_background=with_background,
    )


class AccessorySelector:
    catalog: AssetCatalog

    def __init__(self, catalog: AssetCatalog):
        self.catalog = catalog

    def select(self, digest: HashDigest, with_background: bool = False) -> AccessorySet:
        return select_accessories(self.catalog, digest, with_background)
