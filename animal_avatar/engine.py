"""Avatar render pipeline.

One request runs these stages strictly in order, with no retries:

1. Resolving: look the address up in the vanity table.
2. Selecting (or overridden): on a miss, map the digest to an
   :class:`AccessorySet`; on a hit, wrap the vanity asset and never read the
   digest.
3. Composing: stack the layers into an SVG document.
4. Rasterizing (PNG/WEBP only).

The engine holds nothing but the immutable catalog, so one instance serves
any number of concurrent requests.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from animal_avatar.catalog import AssetCatalog
from animal_avatar.errors import RenderError
from animal_avatar.models import DigestDriven, HashDigest, Selection, VanityFixed
from animal_avatar.options import MIME_TYPES, RenderOptions
from animal_avatar.renderer import compose_svg, rasterize
from animal_avatar.selector import select_accessories
from animal_avatar.types import Address, DigestFn, ImageFormat
from animal_avatar.vanity import VanityResolver


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedImage:
    """Encoded image and the mime type to serve it with."""

    data: bytes
    mime_type: str


class AnimalEngine:
    catalog: AssetCatalog
    vanity_resolver: VanityResolver

    def __init__(self, catalog: AssetCatalog):
        self.catalog = catalog
        self.vanity_resolver = VanityResolver(catalog)

    def select(
        self,
        digest: HashDigest,
        address: Optional[Address] = None,
        with_background: bool = False,
    ) -> Selection:
        """Resolve the vanity override or the digest-driven selection."""
        vanity = self.vanity_resolver.resolve(address)
        if vanity is not None:
            return VanityFixed(vanity, with_background=with_background)
        return DigestDriven(
            select_accessories(self.catalog, digest, with_background=with_background)
        )

    def select_for_address(
        self,
        address: Address,
        digest_fn: DigestFn,
        with_background: bool = False,
    ) -> Selection:
        """Like :meth:`select`, but only derives a digest on a vanity miss."""
        vanity = self.vanity_resolver.resolve(address)
        if vanity is not None:
            return VanityFixed(vanity, with_background=with_background)
        return DigestDriven(
            select_accessories(
                self.catalog, digest_fn(address), with_background=with_background
            )
        )

    def render(
        self,
        digest: HashDigest,
        address: Optional[Address] = None,
        options: RenderOptions = RenderOptions(),
    ) -> RenderedImage:
        """Run the full pipeline for one request.

        Arguments:
            digest: Validated digest for the account.
            address: Normalized address, used only for the vanity lookup.
            options: Validated format, size and background flag.

        Returns:
            RenderedImage: Encoded bytes plus mime type.

        Raises:
            RenderError: If rasterization fails.
        """
        selection = self.select(digest, address, options.with_background)
        svg = compose_svg(selection)
        if options.image_format == ImageFormat.SVG:
            return RenderedImage(svg, options.mime_type)

        logger.debug(
            "Rasterizing %s at %dpx for %s",
            options.image_format,
            options.size,
            address or digest.to_hex(),
        )
        try:
            data = rasterize(svg, options.image_format, options.size)
        except RenderError:
            logger.error(
                "Render failed for %s (%s, %dpx)",
                address or digest.to_hex(),
                options.image_format,
                options.size,
                exc_info=True,
            )
            raise
        return RenderedImage(data, options.mime_type)

    def random_svg(self) -> RenderedImage:
        """Animal for a fresh random digest, without background."""
        selection = DigestDriven(
            select_accessories(self.catalog, HashDigest.random(), with_background=False)
        )
        return RenderedImage(compose_svg(selection), MIME_TYPES[ImageFormat.SVG])
