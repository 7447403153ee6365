import hashlib
import os
from functools import lru_cache
from typing import Dict, List, Optional

from animal_avatar.catalog import AssetCatalog, load_catalog
from animal_avatar.models import HashDigest
from animal_avatar.selector import CATEGORY_RANGES
from animal_avatar.types import CategoryName


# Selects monocle / beanie / none / tongue / overalls / sneakers / bow.
FIXED_DIGEST_HEX = "a3f1c2d47e5b9108c6d2e3f71a2b3c4d9f8e7d6c5b4a392a17263545e0c18f3a"

GOLDEN_ADDRESS = "paw_1pi5su6e5ke7e3tqtmnf3e96y514zrp3w6xj85rjkca4oymywbsrm9sxy6g3"
ROBOT_ADDRESS = "paw_33der9wny93ekujnzo9orb81rt9whm1gc4s1iqzx8ti6fgkxmzdg3deb4jrb"
PLAIN_ADDRESS = "paw_1qqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqq"


@lru_cache(maxsize=1)
def default_catalog() -> AssetCatalog:
    """Built-in catalog, loaded once per test session."""
    return load_catalog()


def fixed_digest() -> HashDigest:
    return HashDigest.from_hex(FIXED_DIGEST_HEX)


def sample_digests(n: int, prefix: str = "sample") -> List[HashDigest]:
    """Deterministic pseudo-random digests."""
    return [
        HashDigest(hashlib.sha256(f"{prefix}-{i}".encode()).digest()) for i in range(n)
    ]


def with_bytes(digest: HashDigest, start: int, value: bytes) -> HashDigest:
    """Copy of ``digest`` with ``value`` written at ``start``."""
    raw = bytearray(digest.value)
    raw[start : start + len(value)] = value
    return HashDigest(bytes(raw))


def with_category_value(
    digest: HashDigest, category: CategoryName, value: int
) -> HashDigest:
    byte_range = CATEGORY_RANGES[category]
    return with_bytes(digest, byte_range.start, value.to_bytes(byte_range.width, "big"))


def svg_document(body: str, view_box: Optional[str] = "0 0 256 256") -> str:
    view_box_attr = f' viewBox="{view_box}"' if view_box is not None else ""
    return f'<svg xmlns="http://www.w3.org/2000/svg"{view_box_attr}>{body}</svg>'


def write_files(root: str, files: Dict[str, str]) -> None:
    """Write ``{relative_path: content}`` under ``root``."""
    for path, content in files.items():
        full_path = os.path.join(root, path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)
