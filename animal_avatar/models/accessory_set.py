"""Digest-driven selection result."""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import PMap

from animal_avatar.models.asset import Asset
from animal_avatar.models.color import Color
from animal_avatar.types import CategoryName, ColorName


@dataclass(frozen=True)
class AccessorySet:
    """Assets and colors chosen for one digest.

    ``assets`` always holds every :class:`CategoryName`; ``None`` means the
    category contributes nothing. ``with_background`` only affects rendering,
    the background color is computed either way.

    Attributes:
        body: Base animal drawing, always present.
        assets: Selected asset (or ``None``) per accessory category.
        colors: Derived color per color category.
        with_background: Whether the background layer is drawn.
    """

    body: Asset
    assets: PMap[CategoryName, Optional[Asset]]
    colors: PMap[ColorName, Color]
    with_background: bool = False

    def asset(self, category: CategoryName) -> Optional[Asset]:
        return self.assets[category]
