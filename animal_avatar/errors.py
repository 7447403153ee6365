"""Error taxonomy.

* ``ValidationError`` - caller input rejected before any rendering work.
* ``RenderError`` - rasterization failed on a document that passed
  validation; an internal failure, never reported as bad input.
* ``CatalogError`` - asset or vanity definitions are missing or corrupt.
  Raised only while loading the catalog at startup.
"""


class AnimalError(Exception):
    """Base class for all errors raised by the engine."""


class ValidationError(AnimalError, ValueError):
    """Malformed digest, unsupported format or out-of-range size."""


class RenderError(AnimalError):
    """Raster conversion failed; no partial output is produced."""


class CatalogError(AnimalError):
    """Asset catalog could not be loaded."""
