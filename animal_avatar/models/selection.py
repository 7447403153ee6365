"""Selection variants consumed by the composer and stats.

``DigestDriven`` wraps an :class:`AccessorySet`; ``VanityFixed`` wraps a
:class:`VanityAsset`. Both expose the same read-only surface:

* ``assets``: asset (or ``None``) per accessory category.
* ``colors``: color per color category.
* ``background_color``: color of the background layer, ``None`` to omit it.
* ``layers()``: layer name to rendered markup for every non-empty layer.

Downstream code never needs to know which variant it holds.
"""

from dataclasses import dataclass
from typing import Optional, Union

from pyrsistent import PMap, pmap

from animal_avatar.models.accessory_set import AccessorySet
from animal_avatar.models.asset import Asset
from animal_avatar.models.color import Color
from animal_avatar.models.vanity import VanityAsset
from animal_avatar.types import CategoryName, ColorName


BODY_LAYER = "body"
BACKGROUND_LAYER = "background"


@dataclass(frozen=True)
class DigestDriven:
    accessories: AccessorySet

    @property
    def assets(self) -> PMap[CategoryName, Optional[Asset]]:
        return self.accessories.assets

    @property
    def colors(self) -> PMap[ColorName, Color]:
        return self.accessories.colors

    @property
    def background_color(self) -> Optional[Color]:
        if not self.accessories.with_background:
            return None
        return self.colors[ColorName.BACKGROUND]

    def layers(self) -> PMap[str, str]:
        layers = {BODY_LAYER: self.accessories.body.render(self.colors)}
        for category, asset in self.assets.items():
            if asset is not None:
                layers[str(category)] = asset.render(self.colors)
        return pmap(layers)


@dataclass(frozen=True)
class VanityFixed:
    """Vanity override; the drawing occupies the body layer alone."""

    vanity: VanityAsset
    with_background: bool = False

    @property
    def assets(self) -> PMap[CategoryName, Optional[Asset]]:
        return pmap({category: None for category in CategoryName})

    @property
    def colors(self) -> PMap[ColorName, Color]:
        return self.vanity.colors

    @property
    def background_color(self) -> Optional[Color]:
        if not (self.with_background and self.vanity.background_eligible):
            return None
        return self.colors[ColorName.BACKGROUND]

    def layers(self) -> PMap[str, str]:
        return pmap({BODY_LAYER: self.vanity.content})


Selection = Union[DigestDriven, VanityFixed]
