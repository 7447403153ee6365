from typing import List

import pytest

from animal_avatar.engine import AnimalEngine
from animal_avatar.errors import ValidationError
from animal_avatar.models import HashDigest, seeded_digest_fn
from animal_avatar.stats import (
    NONE_LABEL,
    StatsAggregator,
    color_key,
    describe_selection,
    selection_histogram,
)
from animal_avatar.types import CategoryName, ColorName
from tests.test_utils import (
    FIXED_DIGEST_HEX,
    GOLDEN_ADDRESS,
    PLAIN_ADDRESS,
    ROBOT_ADDRESS,
    default_catalog,
    fixed_digest,
    sample_digests,
)


EXPECTED_KEYS = [
    "glasses",
    "hat",
    "misc",
    "mouth",
    "shirt_pants",
    "shoes",
    "tail_accessory",
    "color_background",
    "color_body",
    "color_accent",
]


def _aggregator(seed: str = "stats-seed") -> StatsAggregator:
    return StatsAggregator(AnimalEngine(default_catalog()), seeded_digest_fn(seed))


def _addresses(n: int) -> List[str]:
    return [f"paw_1test{i:04d}" for i in range(n)]


def test_color_key() -> None:
    assert color_key(ColorName.BODY) == "color_body"


def test_describe_fixed_selection() -> None:
    selection = AnimalEngine(default_catalog()).select(fixed_digest(), with_background=True)
    assert describe_selection(selection) == {
        "glasses": "monocle",
        "hat": "beanie",
        "misc": NONE_LABEL,
        "mouth": "tongue",
        "shirt_pants": "overalls",
        "shoes": "sneakers",
        "tail_accessory": "bow",
        "color_background": "#f5abe1",
        "color_body": "#77b6d9",
        "color_accent": "#abeb3b",
    }


def test_report_shape_and_order() -> None:
    addresses = _addresses(20)
    report = _aggregator().report(addresses)
    assert len(report) == len(addresses)
    for entry in report:
        assert list(entry) == EXPECTED_KEYS
        assert all(value.startswith("#") for key, value in entry.items() if key.startswith("color_"))
    assert report == [_aggregator().report([address])[0] for address in addresses]


def test_report_keeps_duplicates() -> None:
    report = _aggregator().report([PLAIN_ADDRESS, PLAIN_ADDRESS])
    assert len(report) == 2
    assert report[0] == report[1]


def test_report_depends_on_seed() -> None:
    addresses = _addresses(10)
    assert _aggregator("a").report(addresses) != _aggregator("b").report(addresses)


def test_vanity_addresses_skip_digest() -> None:
    calls: List[str] = []

    def digest_fn(address: str) -> HashDigest:
        calls.append(address)
        return fixed_digest()

    aggregator = StatsAggregator(AnimalEngine(default_catalog()), digest_fn)
    golden, plain, robot = aggregator.report([GOLDEN_ADDRESS, PLAIN_ADDRESS, ROBOT_ADDRESS])

    assert calls == [PLAIN_ADDRESS]
    assert all(golden[str(category)] == NONE_LABEL for category in CategoryName)
    assert golden["color_background"] == "#fff8e1"
    assert golden["color_body"] == "#e6b422"
    assert robot["color_accent"] == "#4ce0b3"
    assert plain["hat"] == "beanie"


def test_failing_digest_fails_whole_batch() -> None:
    def digest_fn(address: str) -> HashDigest:
        if address == "paw_bad":
            return HashDigest.from_hex("zz")
        return HashDigest.from_hex(FIXED_DIGEST_HEX)

    aggregator = StatsAggregator(AnimalEngine(default_catalog()), digest_fn)
    with pytest.raises(ValidationError):
        aggregator.report([PLAIN_ADDRESS, "paw_bad", GOLDEN_ADDRESS])


def test_report_by_address_collapses_duplicates() -> None:
    aggregator = _aggregator()
    by_address = aggregator.report_by_address([PLAIN_ADDRESS, GOLDEN_ADDRESS, PLAIN_ADDRESS])
    assert list(by_address) == [PLAIN_ADDRESS, GOLDEN_ADDRESS]
    assert by_address[PLAIN_ADDRESS] == aggregator.report([PLAIN_ADDRESS])[0]


def test_empty_batch() -> None:
    assert _aggregator().report([]) == []


def test_histogram_counts() -> None:
    catalog = default_catalog()
    n = 200
    histogram = selection_histogram(catalog, sample_digests(n, "histogram"))
    assert set(histogram) == set(CategoryName)
    for category, counts in histogram.items():
        assert sum(counts.values()) == n
        labels = [asset.identifier for asset in catalog.list_category(category)]
        if catalog.allow_none[category]:
            labels.append(NONE_LABEL)
        assert list(counts) == labels
    assert NONE_LABEL not in histogram[CategoryName.MOUTH]
