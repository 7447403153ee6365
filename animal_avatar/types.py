"""Common type aliases and enumerations.

``CategoryName`` and ``ColorName`` values double as the keys of the bulk
stats report, so their string values are part of the public contract.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


if TYPE_CHECKING:
    from animal_avatar.models.digest import HashDigest

Address = str
AssetIdentifier = str

DigestFn = Callable[[Address], "HashDigest"]


class CategoryName(StrEnum):
    """Accessory categories, one selectable asset (or none) each."""

    GLASSES = auto()
    HAT = auto()
    MISC = auto()
    MOUTH = auto()
    SHIRT_PANTS = auto()
    SHOES = auto()
    TAIL_ACCESSORY = auto()


class ColorName(StrEnum):
    """Color categories derived from the digest."""

    BACKGROUND = auto()
    BODY = auto()
    ACCENT = auto()


class ImageFormat(StrEnum):
    """Output formats accepted by the render pipeline."""

    SVG = auto()
    PNG = auto()
    WEBP = auto()
