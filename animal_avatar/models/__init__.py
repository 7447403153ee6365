"""animal_avatar.models
=====================

Immutable value objects shared by every stage of the pipeline.

Everything here is a frozen ``@dataclass``; collections inside them are
``pyrsistent`` persistent maps so a loaded catalog or a selection can be
shared freely between concurrent requests::

    from animal_avatar.models import HashDigest, Color, DigestDriven
"""

from .accessory_set import AccessorySet
from .asset import Asset
from .color import Color
from .digest import DIGEST_SIZE, HashDigest, seeded_digest_fn
from .selection import (
    BACKGROUND_LAYER,
    BODY_LAYER,
    DigestDriven,
    Selection,
    VanityFixed,
)
from .vanity import VanityAsset

__all__ = [
    "AccessorySet",
    "Asset",
    "BACKGROUND_LAYER",
    "BODY_LAYER",
    "Color",
    "DIGEST_SIZE",
    "DigestDriven",
    "HashDigest",
    "Selection",
    "VanityAsset",
    "VanityFixed",
    "seeded_digest_fn",
]
