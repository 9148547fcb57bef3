# sdk/inventory_client.py
import os
from typing import Any, Dict, Optional

import httpx
import requests
from rich import print

DEFAULT_BASE_URL = os.environ.get("INVENTORY_API_URL", "http://127.0.0.1:3000")


class InventoryClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 10,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout
        self.async_transport = async_transport

    @staticmethod
    def _list_params(
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Dict[str, Any]:
        # only send what is set, the server applies its own defaults
        params: Dict[str, Any] = {}
        if search:
            params["search"] = search
        if page:
            params["page"] = page
        if limit:
            params["limit"] = limit
        if sort_by:
            params["sortBy"] = sort_by
        if order:
            params["order"] = order
        return params

    # Products: list / search / sort / paginate
    def list_products(
        self,
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Return the list envelope: ``{"data": [...], "page", "limit", "total"}``."""
        params = self._list_params(search, page, limit, sort_by, order)
        r = self.session.get(f"{self.base_url}/product", params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    async def list_products_async(
        self,
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Dict[str, Any]:
        params = self._list_params(search, page, limit, sort_by, order)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.async_transport) as client:
            r = await client.get(f"{self.base_url}/product", params=params)
            r.raise_for_status()
            return r.json()

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(f"{self.base_url}/product/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()["data"]

    def create_product(self, name: str, quantity: float, price: float, description: str, category: str) -> Dict[str, Any]:
        r = self.session.post(f"{self.base_url}/product", json={
            "name": name,
            "quantity": quantity,
            "price": price,
            "description": description,
            "category": category,
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.json()["data"]

    def update_product(self, product_id: str, **fields: Any) -> Dict[str, Any]:
        payload = {k: v for k, v in fields.items() if v is not None}
        r = self.session.patch(f"{self.base_url}/product/{product_id}", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()["data"]

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.delete(f"{self.base_url}/product/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()["data"]


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Inventory API client")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--search", help="Case-insensitive match on product name")
    lp.add_argument("--page", type=int, help="Page number (1-based)")
    lp.add_argument("--limit", type=int, help="Page size")
    lp.add_argument("--sort-by", choices=["price", "quantity"], help="Sort field")
    lp.add_argument("--order", choices=["asc", "desc"], help="Sort order")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--quantity", type=float, required=True, help="Quantity in stock")
    cp.add_argument("--price", type=float, required=True, help="Unit price")
    cp.add_argument("--description", required=True, help="Product description")
    cp.add_argument("--category", required=True, help="Product category")

    up = subparsers.add_parser("update-product", help="Update some fields of a product")
    up.add_argument("--product-id", required=True, help="ID of the product")
    up.add_argument("--name")
    up.add_argument("--quantity", type=float)
    up.add_argument("--price", type=float)
    up.add_argument("--description")
    up.add_argument("--category")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")

    args = parser.parse_args()
    c = InventoryClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products(args.search, args.page, args.limit, args.sort_by, args.order))

    elif args.command == "get-product":
        print(c.get_product(args.product_id))

    elif args.command == "create-product":
        print(c.create_product(args.name, args.quantity, args.price, args.description, args.category))

    elif args.command == "update-product":
        print(c.update_product(
            args.product_id,
            name=args.name,
            quantity=args.quantity,
            price=args.price,
            description=args.description,
            category=args.category,
        ))

    elif args.command == "delete-product":
        print(c.delete_product(args.product_id))
