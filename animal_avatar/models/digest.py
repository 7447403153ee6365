"""Hash digest value object.

The digest is the sole entropy source for selection. It is produced and
validated upstream; this module only enforces the fixed length so that a
contract violation fails fast instead of yielding a silently different
animal.
"""

import hashlib
import secrets
from dataclasses import dataclass

from animal_avatar.errors import ValidationError
from animal_avatar.types import Address, DigestFn


DIGEST_SIZE = 32


@dataclass(frozen=True)
class HashDigest:
    """Fixed-length opaque digest.

    Attributes:
        value: Exactly ``DIGEST_SIZE`` raw bytes.
    """

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise ValidationError(
                f"Digest must be bytes, got {type(self.value).__name__}"
            )
        if len(self.value) != DIGEST_SIZE:
            raise ValidationError(
                f"Digest must be {DIGEST_SIZE} bytes, got {len(self.value)}"
            )

    @classmethod
    def from_hex(cls, value: str) -> "HashDigest":
        """Parse a ``2 * DIGEST_SIZE`` character hex string."""
        if len(value) != DIGEST_SIZE * 2:
            raise ValidationError(
                f"Digest must be {DIGEST_SIZE * 2} hex characters, got {len(value)}"
            )
        try:
            raw = bytes.fromhex(value)
        except ValueError as exc:
            raise ValidationError(f"Digest is not valid hex: {value!r}") from exc
        return cls(raw)

    @classmethod
    def random(cls) -> "HashDigest":
        """Fresh random digest, for previews only."""
        return cls(secrets.token_bytes(DIGEST_SIZE))

    def to_hex(self) -> str:
        return self.value.hex()

    def __getitem__(self, item: slice) -> bytes:
        return self.value[item]


def seeded_digest_fn(seed: str) -> DigestFn:
    """Reference address-to-digest function: ``sha256(address + seed)``.

    Deployments with their own key recovery and seeding scheme inject a
    different ``DigestFn``; the engine never depends on this one.
    """

    def digest_fn(address: Address) -> HashDigest:
        return HashDigest(hashlib.sha256((address + seed).encode("utf-8")).digest())

    return digest_fn
