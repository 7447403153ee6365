"""Bulk selection reports.

``StatsAggregator`` describes which assets and colors a list of addresses
resolve to, using the same vanity-or-digest path as rendering with the
background always enabled. Each entry has exactly the seven category keys
(asset identifier or ``"none"``) followed by one ``color_<name>`` key per
color category.

The batch is a single logical request: if deriving the digest for any
address raises, the whole call raises and nothing is returned.
"""

from typing import Dict, Iterable, List, Sequence

import numpy as np

from animal_avatar.catalog import AssetCatalog
from animal_avatar.engine import AnimalEngine
from animal_avatar.models import HashDigest, Selection
from animal_avatar.selector import selection_indices
from animal_avatar.types import Address, CategoryName, ColorName, DigestFn


NONE_LABEL = "none"

StatsEntry = Dict[str, str]


def color_key(name: ColorName) -> str:
    return f"color_{name}"


def describe_selection(selection: Selection) -> StatsEntry:
    """Flatten a selection into the stats key layout."""
    entry: StatsEntry = {}
    for category in CategoryName:
        asset = selection.assets[category]
        entry[str(category)] = asset.identifier if asset is not None else NONE_LABEL
    for color_name in ColorName:
        entry[color_key(color_name)] = selection.colors[color_name].to_html()
    return entry


class StatsAggregator:
    engine: AnimalEngine
    digest_fn: DigestFn

    def __init__(self, engine: AnimalEngine, digest_fn: DigestFn):
        self.engine = engine
        self.digest_fn = digest_fn

    def report(self, addresses: Sequence[Address]) -> List[StatsEntry]:
        """One entry per address, in input order (duplicates included)."""
        return [
            describe_selection(
                self.engine.select_for_address(
                    address, self.digest_fn, with_background=True
                )
            )
            for address in addresses
        ]

    def report_by_address(
        self, addresses: Sequence[Address]
    ) -> Dict[Address, StatsEntry]:
        """Entries keyed by address; repeated addresses collapse to one key."""
        return dict(zip(addresses, self.report(addresses)))


def selection_histogram(
    catalog: AssetCatalog, digests: Iterable[HashDigest]
) -> Dict[CategoryName, Dict[str, int]]:
    """Count how often each outcome is selected over ``digests``.

    Used to audit selection bias of the layout against a catalog. Labels are
    asset identifiers plus ``"none"`` for categories that allow it.
    """
    residues: Dict[CategoryName, List[int]] = {name: [] for name in CategoryName}
    for digest in digests:
        for name, index in selection_indices(catalog, digest).items():
            residues[name].append(index)

    histogram: Dict[CategoryName, Dict[str, int]] = {}
    for name in CategoryName:
        counts = np.bincount(
            np.asarray(residues[name], dtype=np.int64),
            minlength=catalog.option_count(name),
        )
        labels = [asset.identifier for asset in catalog.list_category(name)]
        if catalog.allow_none[name]:
            labels.append(NONE_LABEL)
        histogram[name] = {label: int(count) for label, count in zip(labels, counts)}
    return histogram
