"""
In-memory product catalog.

Read-only lookup of products by code, built once from a list of products.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional
import logging

from domain.models.product import Product
from shared.constants import PRODUCT_FIELD_SEPARATOR, PRODUCT_SEPARATOR
from shared.exceptions import ConfigurationError, DataValidationError
from shared.validators import normalize_product_code

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Case-insensitive product lookup by code."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: Dict[str, Product] = {}
        for product in products:
            if product.code in self._products:
                logger.debug(f"Catalog entry {product.code} replaced by {product.name!r}")
            self._products[product.code] = product

    @classmethod
    def parse(cls, text: str) -> ProductCatalog:
        """
        Build a catalog from text such as ``"R01:Red Widget:32.95,B01:Blue Widget:7.95"``.

        Raises:
            ConfigurationError: If an entry is not a valid code:name:price triple
        """
        products = []
        for entry in (text or "").split(PRODUCT_SEPARATOR):
            entry = entry.strip()
            if not entry:
                continue

            parts = [part.strip() for part in entry.split(PRODUCT_FIELD_SEPARATOR)]
            if len(parts) != 3:
                raise ConfigurationError(
                    f"Invalid catalog entry {entry!r}: expected code{PRODUCT_FIELD_SEPARATOR}"
                    f"name{PRODUCT_FIELD_SEPARATOR}price",
                    details={"catalog": text},
                )

            try:
                products.append(Product(*parts))
            except DataValidationError as e:
                raise ConfigurationError(
                    f"Invalid catalog entry {entry!r}: {e.message}",
                    details={"catalog": text},
                    original_exception=e,
                )

        return cls(products)

    def find(self, code: Any) -> Optional[Product]:
        """Find a product by code; returns None when absent."""
        return self._products.get(normalize_product_code(code))

    def all(self) -> List[Product]:
        """All products, in the order their codes were first registered."""
        return list(self._products.values())

    def codes(self) -> List[str]:
        return list(self._products)

    def __contains__(self, code: Any) -> bool:
        return self.find(code) is not None

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self) -> str:
        return f"ProductCatalog({self.codes()})"
