import re
import xml.etree.ElementTree as ET
from typing import List

from animal_avatar.models import DigestDriven, VanityFixed
from animal_avatar.renderer import LAYER_ORDER, SVGComposer, compose_svg
from animal_avatar.selector import select_accessories
from animal_avatar.utils.svg import substitute_colors
from tests.test_utils import (
    GOLDEN_ADDRESS,
    ROBOT_ADDRESS,
    default_catalog,
    fixed_digest,
    sample_digests,
)


def _layer_ids(svg: bytes) -> List[str]:
    return re.findall(r'<g id="([a-z_]+)">', svg.decode("utf-8"))


def _digest_selection(with_background: bool) -> DigestDriven:
    return DigestDriven(
        select_accessories(default_catalog(), fixed_digest(), with_background)
    )


def _vanity_selection(address: str, with_background: bool) -> VanityFixed:
    vanity = default_catalog().lookup_vanity(address)
    assert vanity is not None
    return VanityFixed(vanity, with_background)


def test_composition_is_byte_identical() -> None:
    for digest in sample_digests(10):
        selection = DigestDriven(select_accessories(default_catalog(), digest, True))
        assert compose_svg(selection) == compose_svg(selection)
        rebuilt = DigestDriven(select_accessories(default_catalog(), digest, True))
        assert compose_svg(rebuilt) == compose_svg(selection)


def test_layers_follow_z_order_and_skip_none() -> None:
    svg = compose_svg(_digest_selection(with_background=True))
    assert _layer_ids(svg) == [
        "background",
        "body",
        "shirt_pants",
        "tail_accessory",
        "shoes",
        "mouth",
        "glasses",
        "hat",
    ]
    assert '<g id="misc">' not in svg.decode("utf-8")


def test_layer_ids_always_in_layer_order() -> None:
    for digest in sample_digests(30):
        svg = compose_svg(DigestDriven(select_accessories(default_catalog(), digest, True)))
        ids = _layer_ids(svg)
        assert ids == [layer for layer in LAYER_ORDER if layer in ids]


def test_document_is_well_formed() -> None:
    svg = compose_svg(_digest_selection(with_background=True))
    root = ET.fromstring(svg)
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert root.get("viewBox") == "0 0 256 256"
    assert root.get("width") == root.get("height") == "256"
    assert svg.endswith(b"</svg>\n")


def test_background_omitted_on_request() -> None:
    svg = compose_svg(_digest_selection(with_background=False)).decode("utf-8")
    assert "background" not in svg
    assert "#f5abe1" not in svg


def test_background_uses_digest_color() -> None:
    svg = compose_svg(_digest_selection(with_background=True)).decode("utf-8")
    assert '<g id="background"><rect width="256" height="256" fill="#f5abe1"/></g>' in svg


def test_slot_colors_are_substituted() -> None:
    svg = compose_svg(_digest_selection(with_background=False)).decode("utf-8").lower()
    assert "#c8a27a" not in svg
    assert "#e0457b" not in svg
    assert "#77b6d9" in svg
    assert "#abeb3b" in svg


def test_vanity_background_honors_eligibility() -> None:
    golden = compose_svg(_vanity_selection(GOLDEN_ADDRESS, True)).decode("utf-8")
    robot = compose_svg(_vanity_selection(ROBOT_ADDRESS, True)).decode("utf-8")
    assert _layer_ids(golden.encode()) == ["background", "body"]
    assert 'fill="#fff8e1"' in golden
    assert _layer_ids(robot.encode()) == ["body"]


def test_vanity_without_background() -> None:
    svg = compose_svg(_vanity_selection(GOLDEN_ADDRESS, False))
    assert _layer_ids(svg) == ["body"]


def test_composer_object_matches_function() -> None:
    selection = _digest_selection(with_background=True)
    assert SVGComposer().compose(selection) == compose_svg(selection)


def test_substitution_does_not_cascade() -> None:
    content = 'fill="#AAAAAA" stroke="#bbbbbb"'
    replaced = substitute_colors(content, {"#aaaaaa": "#bbbbbb", "#bbbbbb": "#cccccc"})
    assert replaced == 'fill="#bbbbbb" stroke="#cccccc"'
    assert substitute_colors(content, {}) == content


def test_substitution_matches_complete_literals_only() -> None:
    content = '<rect fill="#e0457bff"/><circle fill="#E0457B"/>'
    replaced = substitute_colors(content, {"#e0457b": "#000000"})
    assert replaced == '<rect fill="#e0457bff"/><circle fill="#000000"/>'
