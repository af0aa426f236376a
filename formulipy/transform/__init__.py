"""Formula rewrites."""

from formulipy.transform.isotopes import isotopic_normalization

__all__ = [
    "isotopic_normalization",
]
