import pytest

from animal_avatar.errors import ValidationError
from animal_avatar.models import Color


@pytest.mark.parametrize(
    "html, expected",
    [
        ("#ff0000", Color(255, 0, 0)),
        ("00FF7f", Color(0, 255, 127)),
        ("#0a0B0c", Color(10, 11, 12)),
    ],
)
def test_from_html(html: str, expected: Color) -> None:
    assert Color.from_html(html) == expected


@pytest.mark.parametrize("html", ["", "#fff", "#12345g", "red", "#1234567"])
def test_from_html_rejects_malformed(html: str) -> None:
    with pytest.raises(ValidationError):
        Color.from_html(html)


def test_to_html() -> None:
    color = Color(171, 235, 59)
    assert color.to_html() == "#abeb3b"
    assert color.to_html(include_hash=False) == "abeb3b"


def test_channels_must_be_bytes() -> None:
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, 0, 0, -1)


@pytest.mark.parametrize(
    "hsv, expected",
    [
        ((0.0, 1.0, 1.0), "#ff0000"),
        ((1 / 3, 1.0, 1.0), "#00ff00"),
        ((0.0, 0.0, 0.0), "#000000"),
        ((0.0, 0.0, 1.0), "#ffffff"),
        ((143 / 256, 0.45, 0.85), "#77b6d9"),
    ],
)
def test_from_hsv(hsv: tuple, expected: str) -> None:
    assert Color.from_hsv(*hsv).to_html() == expected
