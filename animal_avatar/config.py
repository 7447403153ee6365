"""Environment-driven configuration."""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache


DEFAULT_ASSET_ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")


@dataclass(frozen=True)
class Settings:
    """Process settings, read once from the environment.

    Attributes:
        asset_root: Directory holding the SVG assets (``ANIMAL_ASSET_ROOT``).
        seed: Secret mixed into the reference address digest (``ANIMAL_SEED``).
        log_level: Root logging level name (``LOG_LEVEL``).
    """

    asset_root: str = field(
        default_factory=lambda: os.getenv("ANIMAL_ASSET_ROOT", DEFAULT_ASSET_ROOT)
    )
    seed: str = field(default_factory=lambda: os.getenv("ANIMAL_SEED", ""))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance to avoid repeated environment reads."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging for scripts and the preview app."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
