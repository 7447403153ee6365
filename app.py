from typing import List, Optional

import streamlit as st

from animal_avatar.catalog import get_catalog
from animal_avatar.config import configure_logging, get_settings
from animal_avatar.engine import AnimalEngine, RenderedImage
from animal_avatar.errors import AnimalError, ValidationError
from animal_avatar.models import HashDigest, seeded_digest_fn
from animal_avatar.options import (
    DEFAULT_RASTER_SIZE,
    MAX_RASTER_SIZE,
    MIN_RASTER_SIZE,
    RenderOptions,
    parse_render_options,
)
from animal_avatar.stats import StatsAggregator
from animal_avatar.types import ImageFormat


st.set_page_config(layout="wide", page_title="Animal Avatars")

settings = get_settings()
configure_logging(settings)


@st.cache_resource
def get_engine() -> AnimalEngine:
    return AnimalEngine(get_catalog())


def get_options_from_widgets() -> RenderOptions:
    st.subheader("Output")
    image_format: str = st.selectbox(
        "Format", [f.value for f in ImageFormat], index=0, key="format"
    )
    size: int = st.slider(
        "Size (raster only)",
        MIN_RASTER_SIZE,
        MAX_RASTER_SIZE,
        DEFAULT_RASTER_SIZE,
        key="size",
    )
    background: bool = st.checkbox("Background", value=True, key="background")
    return parse_render_options(image_format, size, background)


def resolve_digest(address: str, digest_hex: str) -> HashDigest:
    if digest_hex:
        return HashDigest.from_hex(digest_hex.strip())
    return seeded_digest_fn(settings.seed)(address)


def display_image(image: RenderedImage, options: RenderOptions) -> None:
    if options.image_format == ImageFormat.SVG:
        st.markdown(image.data.decode("utf-8"), unsafe_allow_html=True)
    else:
        st.image(image.data, width=options.size)
    st.caption(f"{image.mime_type}, {len(image.data)} bytes")
    st.download_button(
        "Download",
        data=image.data,
        file_name=f"animal.{options.image_format}",
        mime=image.mime_type,
    )


# --------- Main App ---------
engine = get_engine()
tab_render, tab_stats = st.tabs(["Render", "Stats"])

with tab_render:
    left_col, right_col = st.columns([0.4, 0.6])

    with left_col:
        address: str = st.text_input("Address", key="address").strip()
        digest_hex: str = st.text_input("Digest (hex, overrides address)", key="digest")
        options: Optional[RenderOptions] = None
        try:
            options = get_options_from_widgets()
        except ValidationError as exc:
            st.error(str(exc))
        random_clicked = st.button("Random animal", use_container_width=True)

    with right_col:
        try:
            if random_clicked:
                display_image(engine.random_svg(), RenderOptions())
            elif options is not None and (address or digest_hex):
                digest = resolve_digest(address, digest_hex)
                display_image(engine.render(digest, address or None, options), options)
            else:
                st.info("Enter an address or a digest")
        except AnimalError as exc:
            st.error(str(exc))

with tab_stats:
    raw: str = st.text_area("Addresses (one per line)", key="stats_addresses")
    addresses: List[str] = [line.strip() for line in raw.splitlines() if line.strip()]
    if addresses:
        aggregator = StatsAggregator(engine, seeded_digest_fn(settings.seed))
        try:
            st.json(aggregator.report_by_address(addresses), expanded=2)
        except AnimalError as exc:
            st.error(str(exc))
