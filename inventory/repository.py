# inventory/repository.py
import threading
from typing import Any, Dict, Iterable, List, Optional

from .models import Product


class ProductRepository:
    """In-memory product collection keyed by id.

    The repository is the only holder of product state while the process runs.
    Every call takes ``lock``; callers that need a read followed by a write
    (update, delete) hold it across both.
    """

    def __init__(self) -> None:
        self._products: Dict[str, Product] = {}
        self.lock = threading.RLock()

    def load(self, records: Iterable[Product]) -> None:
        with self.lock:
            self._products = {record.id: record for record in records}

    def snapshot_all(self) -> List[Product]:
        with self.lock:
            return list(self._products.values())

    def get(self, product_id: str) -> Optional[Product]:
        with self.lock:
            return self._products.get(product_id)

    def put(self, product_id: str, record: Product) -> None:
        with self.lock:
            self._products[product_id] = record

    def remove(self, product_id: str) -> None:
        with self.lock:
            del self._products[product_id]

    def dump_all(self) -> List[Dict[str, Any]]:
        with self.lock:
            return [record.model_dump() for record in self._products.values()]

    def __len__(self) -> int:
        with self.lock:
            return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        with self.lock:
            return product_id in self._products
