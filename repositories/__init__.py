"""
Repository layer for data access abstraction.

Products are held in memory for the duration of a run; there is no
persistent store behind the catalog.
"""

from repositories.product_catalog import ProductCatalog

__all__ = [
    "ProductCatalog",
]
