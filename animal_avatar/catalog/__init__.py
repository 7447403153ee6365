"""Asset catalog subpackage.

:mod:`animal_avatar.catalog.definitions` holds the authoring tables (which
files exist, which of their colors are recolorable, which addresses have a
vanity drawing). :mod:`animal_avatar.catalog.catalog` turns those tables into
an immutable :class:`AssetCatalog` at startup.
"""

from .catalog import AssetCatalog, get_catalog, load_catalog

__all__ = ["AssetCatalog", "get_catalog", "load_catalog"]
