"""Color value object.

Colors are stored as 8-bit channels. Conversions from HSV go through
:mod:`colorsys` and are quantised with :func:`round` (half to even) so the
same hue always produces the same HTML hex string.
"""

import colorsys
import re
from dataclasses import dataclass
from typing import Tuple

from animal_avatar.errors import ValidationError


_HTML_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def _channel(value: float) -> int:
    return min(255, max(0, round(value * 255)))


@dataclass(frozen=True)
class Color:
    """RGB color with alpha.

    Attributes:
        r: Red channel, 0-255.
        g: Green channel, 0-255.
        b: Blue channel, 0-255.
        a: Alpha channel, 0-255 (opaque by default).
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "Color":
        """Build an opaque color from HSV components in ``[0, 1]``."""
        r, g, b = colorsys.hsv_to_rgb(h, s, v)
        return cls(_channel(r), _channel(g), _channel(b))

    @classmethod
    def from_html(cls, value: str) -> "Color":
        """Parse ``#rrggbb`` (hash optional, either case)."""
        match = _HTML_RE.match(value)
        if match is None:
            raise ValidationError(f"Invalid HTML color: {value!r}")
        hex_value = match.group(1)
        return cls(
            int(hex_value[0:2], 16), int(hex_value[2:4], 16), int(hex_value[4:6], 16)
        )

    def to_html(self, include_hash: bool = True) -> str:
        """Return the lower-case ``#rrggbb`` form (alpha is not encoded)."""
        value = f"{self.r:02x}{self.g:02x}{self.b:02x}"
        return f"#{value}" if include_hash else value

    def to_rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)
