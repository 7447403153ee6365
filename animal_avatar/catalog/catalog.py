"""Process-wide asset catalog.

The catalog is loaded once, before any request is served, and is immutable
afterwards: category lists are persistent vectors and lookups go through
persistent maps, so any number of concurrent renders can share one instance
without locking.

Loading is strict. A missing file, malformed SVG, empty category or
inconsistent color slot raises :class:`CatalogError`; a process that cannot
load its catalog must not start serving.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional, Tuple

from pyrsistent import PMap, PVector, pmap, pvector

from animal_avatar.catalog.definitions import (
    BODY_DEFINITION,
    CANVAS_VIEW_BOX,
    DEFAULT_ASSET_MAP,
    DEFAULT_VANITY_MAP,
    AssetDefinition,
    AssetMap,
    VanityDefinition,
    VanityMap,
)
from animal_avatar.config import DEFAULT_ASSET_ROOT, get_settings
from animal_avatar.errors import CatalogError, ValidationError
from animal_avatar.models import Asset, Color, VanityAsset
from animal_avatar.models.selection import BODY_LAYER
from animal_avatar.types import Address, CategoryName, ColorName
from animal_avatar.utils.svg import (
    contains_color,
    extract_inner_markup,
    parse_root,
    parse_view_box,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetCatalog:
    """Loaded assets and vanity table.

    Attributes:
        body: Base animal drawing shared by every digest-driven selection.
        categories: Ordered assets per accessory category.
        allow_none: Whether "no asset" is a possible outcome per category.
        vanity: Vanity overrides keyed by address.
    """

    body: Asset
    categories: PMap[CategoryName, PVector[Asset]]
    allow_none: PMap[CategoryName, bool]
    vanity: PMap[Address, VanityAsset] = pmap()

    def list_category(self, name: CategoryName) -> Tuple[Asset, ...]:
        """Assets of ``name`` in selection order."""
        return tuple(self.categories[name])

    def option_count(self, name: CategoryName) -> int:
        """Number of distinct outcomes for ``name``, counting "none"."""
        return len(self.categories[name]) + (1 if self.allow_none[name] else 0)

    def lookup_vanity(self, address: Address) -> Optional[VanityAsset]:
        return self.vanity.get(address)


def _read_svg(asset_root: str, path: str) -> str:
    """Read one SVG file and return its inner markup."""
    full_path = os.path.join(asset_root, path)
    try:
        with open(full_path, encoding="utf-8") as f:
            document = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Cannot read asset {full_path}: {exc}") from exc

    try:
        root = parse_root(document)
        view_box = parse_view_box(root)
    except ValueError as exc:
        raise CatalogError(f"Invalid asset {full_path}: {exc}") from exc
    if view_box != CANVAS_VIEW_BOX:
        raise CatalogError(
            f"Asset {full_path} has viewBox {view_box}, expected {CANVAS_VIEW_BOX}"
        )

    content = extract_inner_markup(document)
    if not content:
        raise CatalogError(f"Asset {full_path} has no drawable content")
    return content


def _parse_color(value: str, where: str) -> Color:
    try:
        return Color.from_html(value)
    except ValidationError as exc:
        raise CatalogError(f"{where}: {exc}") from exc


def _load_asset(asset_root: str, category: str, definition: AssetDefinition) -> Asset:
    content = _read_svg(asset_root, definition.path)
    where = f"Asset {definition.path}"

    slots: Dict[ColorName, str] = {}
    seen: Dict[str, ColorName] = {}
    for color_name, default in definition.slots.items():
        if not isinstance(color_name, ColorName):
            raise CatalogError(f"{where}: unknown color slot {color_name!r}")
        html = _parse_color(default, where).to_html()
        if html in seen:
            raise CatalogError(
                f"{where}: slots {seen[html]} and {color_name} share color {html}"
            )
        if not contains_color(content, html):
            raise CatalogError(f"{where}: slot color {html} not used in drawing")
        seen[html] = color_name
        slots[color_name] = html

    identifier = os.path.splitext(os.path.basename(definition.path))[0]
    return Asset(
        category=category, identifier=identifier, content=content, slots=pmap(slots)
    )


def _load_vanity(
    asset_root: str, address: Address, definition: VanityDefinition
) -> VanityAsset:
    where = f"Vanity {address!r}"
    if not address or address != address.strip():
        raise CatalogError(f"{where}: address must be a non-empty normalized string")
    missing = [name for name in ColorName if name not in definition.colors]
    if missing:
        raise CatalogError(f"{where}: missing colors {', '.join(missing)}")
    colors = {
        name: _parse_color(definition.colors[name], where) for name in ColorName
    }
    return VanityAsset(
        address=address,
        identifier=os.path.splitext(os.path.basename(definition.path))[0],
        content=_read_svg(asset_root, definition.path),
        colors=pmap(colors),
        background_eligible=definition.background_eligible,
    )


def load_catalog(
    asset_root: str = DEFAULT_ASSET_ROOT,
    asset_map: Optional[AssetMap] = None,
    vanity_map: Optional[VanityMap] = None,
    body: AssetDefinition = BODY_DEFINITION,
) -> AssetCatalog:
    """Load and validate every asset and vanity definition.

    Arguments:
        asset_root: Directory the definition paths are relative to.
        asset_map: Category definitions; defaults to the built-in table.
        vanity_map: Vanity definitions; defaults to the built-in table.
        body: Base animal drawing.

    Returns:
        AssetCatalog: Immutable catalog ready to be shared.

    Raises:
        CatalogError: If anything is missing, empty or malformed.
    """
    if asset_map is None:
        asset_map = DEFAULT_ASSET_MAP
    if vanity_map is None:
        vanity_map = DEFAULT_VANITY_MAP

    if not os.path.isdir(asset_root):
        raise CatalogError(f"Asset root {asset_root} is not a directory")

    unknown = [name for name in asset_map if not isinstance(name, CategoryName)]
    if unknown:
        raise CatalogError(f"Unknown categories: {unknown}")
    missing = [name for name in CategoryName if name not in asset_map]
    if missing:
        raise CatalogError(f"Missing categories: {', '.join(missing)}")

    categories: Dict[CategoryName, PVector[Asset]] = {}
    allow_none: Dict[CategoryName, bool] = {}
    for name in CategoryName:
        definition = asset_map[name]
        if len(definition.assets) == 0:
            raise CatalogError(f"Category {name} is empty")
        assets = [_load_asset(asset_root, name, d) for d in definition.assets]
        identifiers = [asset.identifier for asset in assets]
        if len(set(identifiers)) != len(identifiers):
            raise CatalogError(f"Category {name} has duplicate identifiers")
        categories[name] = pvector(assets)
        allow_none[name] = definition.allow_none

    vanity = {
        address: _load_vanity(asset_root, address, definition)
        for address, definition in vanity_map.items()
    }

    catalog = AssetCatalog(
        body=_load_asset(asset_root, BODY_LAYER, body),
        categories=pmap(categories),
        allow_none=pmap(allow_none),
        vanity=pmap(vanity),
    )
    logger.info(
        "Loaded asset catalog from %s: %d assets in %d categories, %d vanity entries",
        asset_root,
        sum(len(assets) for assets in categories.values()),
        len(categories),
        len(vanity),
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> AssetCatalog:
    """Return the process-wide catalog, loading it on first use."""
    return load_catalog(get_settings().asset_root)

