# inventory/query.py
"""Filter, sort and paginate a snapshot of the product collection.

Everything here is a pure function of its inputs; the repository is never
touched. Steps always run in the same order: search filter, stable sort,
then the page slice.
"""
import math
from dataclasses import dataclass
from typing import Any, List, Optional

from .models import Product, ProductQuery, SortField, SortOrder

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass
class Page:
    items: List[Product]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit)


def coerce_positive_int(value: Any, default: int) -> int:
    """Return ``value`` as a positive int, or ``default`` when it is missing,
    non-numeric or not above zero."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def normalize_search(search: Optional[str]) -> str:
    return (search or "").strip().lower()


def filter_by_name(products: List[Product], search: Optional[str]) -> List[Product]:
    term = normalize_search(search)
    if not term:
        return list(products)
    return [p for p in products if term in p.name.lower()]


def sort_products(
    products: List[Product],
    sort_by: Optional[SortField],
    order: Optional[SortOrder] = None,
) -> List[Product]:
    if sort_by is None:
        return list(products)
    key = SortField(sort_by).value
    descending = order is not None and SortOrder(order) is SortOrder.DESC
    # sorted() stays stable with reverse=True, so equal keys keep their order
    return sorted(products, key=lambda p: getattr(p, key), reverse=descending)


def paginate(products: List[Product], page: int, limit: int) -> List[Product]:
    start_index = (page - 1) * limit
    end_index = start_index + limit
    return products[start_index:end_index]


def run_query(products: List[Product], query: ProductQuery) -> Page:
    page = coerce_positive_int(query.page, DEFAULT_PAGE)
    limit = coerce_positive_int(query.limit, DEFAULT_LIMIT)

    matched = filter_by_name(products, query.search)
    ordered = sort_products(matched, query.sort_by, query.order)
    return Page(
        items=paginate(ordered, page, limit),
        page=page,
        limit=limit,
        total=len(matched),
    )
