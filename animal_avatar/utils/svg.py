"""SVG text helpers.

Documents are handled as text rather than re-serialized through an XML
tree: serializing would not preserve the authored attribute layout, and
composed output has to stay byte-identical across runs. ElementTree is used
only to check well-formedness and read root attributes.
"""

import re
import xml.etree.ElementTree as ET
from typing import Iterable, Mapping, Tuple

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

_ROOT_OPEN_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_ROOT_CLOSE = "</svg>"


def parse_root(document: str) -> ET.Element:
    """Parse ``document`` and return its root, which must be ``<svg>``.

    Raises:
        ValueError: If the text is not well-formed XML or the root is not svg.
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as exc:
        raise ValueError(f"Malformed SVG: {exc}") from exc
    if root.tag not in ("svg", f"{{{SVG_NAMESPACE}}}svg"):
        raise ValueError(f"Root element must be svg, got {root.tag!r}")
    return root


def parse_view_box(root: ET.Element) -> Tuple[float, float, float, float]:
    """Return ``(min_x, min_y, width, height)`` from ``viewBox``.

    Falls back to the ``width``/``height`` attributes when no viewBox is set.
    """
    view_box = root.get("viewBox")
    if view_box is not None:
        parts = view_box.replace(",", " ").split()
        if len(parts) != 4:
            raise ValueError(f"Malformed viewBox: {view_box!r}")
        min_x, min_y, width, height = (float(part) for part in parts)
    else:
        width_attr, height_attr = root.get("width"), root.get("height")
        if width_attr is None or height_attr is None:
            raise ValueError("SVG has neither viewBox nor width/height")
        min_x, min_y = 0.0, 0.0
        width = float(width_attr.removesuffix("px"))
        height = float(height_attr.removesuffix("px"))
    if width <= 0 or height <= 0:
        raise ValueError(f"SVG has empty extent: {width}x{height}")
    return min_x, min_y, width, height


def extract_inner_markup(document: str) -> str:
    """Return the markup between the root ``<svg ...>`` and ``</svg>`` tags."""
    match = _ROOT_OPEN_RE.search(document)
    end = document.rfind(_ROOT_CLOSE)
    if match is None or end < match.end():
        return ""
    return document[match.end() : end].strip()


def _color_pattern(colors: Iterable[str]) -> "re.Pattern[str]":
    """Match any of ``colors`` not followed by further hex digits."""
    alternatives = "|".join(re.escape(color) for color in sorted(colors))
    return re.compile(f"(?:{alternatives})(?![0-9a-fA-F])", re.IGNORECASE)


def contains_color(content: str, color: str) -> bool:
    """Whether ``color`` appears in ``content`` as a complete hex literal."""
    return _color_pattern([color]).search(content) is not None


def substitute_colors(content: str, replacements: Mapping[str, str]) -> str:
    """Replace literal colors in one pass, case-insensitively.

    A single regex pass means a replacement value that happens to equal
    another key is never substituted a second time. A color only matches a
    complete literal, so ``#e0457b`` leaves ``#e0457bff`` alone.
    """
    if not replacements:
        return content
    lookup = {key.lower(): value for key, value in replacements.items()}
    pattern = _color_pattern(lookup)
    return pattern.sub(lambda match: lookup[match.group(0).lower()], content)
