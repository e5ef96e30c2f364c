"""JSON-file-backed implementation of ProductRepository.

The file is maintained by the catalog side; this store only reads it.
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def get_by_id(self, product_id: str) -> Product | None:
        return self._catalog().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._catalog().values())

    def _catalog(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                title=item["title"],
                price=Money(int(item["price"]), item.get("currency", "VND")),
                quantity_in_stock=int(item.get("quantity_in_stock", 0)),
            )
            for item in self._file.read()
        }
