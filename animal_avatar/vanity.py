"""Vanity override lookup.

A hit means the digest is never read: the caller renders the vanity drawing
with its fixed colors and only the format, size and background options of
the request still apply.
"""

import logging
from typing import Optional

from animal_avatar.catalog import AssetCatalog
from animal_avatar.models import VanityAsset
from animal_avatar.types import Address


logger = logging.getLogger(__name__)


class VanityResolver:
    catalog: AssetCatalog

    def __init__(self, catalog: AssetCatalog):
        self.catalog = catalog

    def resolve(self, address: Optional[Address]) -> Optional[VanityAsset]:
        """Return the vanity asset for ``address``, or ``None``."""
        if not address:
            return None
        vanity = self.catalog.lookup_vanity(address)
        if vanity is not None:
            logger.debug("Vanity match for %s: %s", address, vanity.identifier)
        return vanity
