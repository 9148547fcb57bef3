# tests/test_sdk.py
import asyncio

import httpx
import pytest

from sdk.inventory_client import InventoryClient


@pytest.fixture
def sdk(client):
    c = InventoryClient(base_url="http://testserver/")
    # route the client's calls through the in-process app
    c.session = client
    return c


def test_list_params_only_include_set_values():
    params = InventoryClient._list_params(search="lamp", page=2, sort_by="price")
    assert params == {"search": "lamp", "page": 2, "sortBy": "price"}
    assert InventoryClient._list_params() == {}


def test_crud_through_client(sdk):
    created = sdk.create_product("Desk Lamp", 3, 24.5, "Warm light", "lighting")
    assert sdk.get_product(created["id"]) == created

    updated = sdk.update_product(created["id"], price=19.99, name=None)
    assert updated["price"] == 19.99
    assert updated["name"] == "Desk Lamp"

    page = sdk.list_products(search="lamp", sort_by="price", order="asc")
    assert page["total"] == 1
    assert page["data"][0]["id"] == created["id"]

    assert sdk.delete_product(created["id"]) == {"message": "Product Deleted Successfully"}
    assert sdk.list_products()["total"] == 0


def test_list_products_async(client):
    c = InventoryClient(base_url="http://testserver", async_transport=httpx.ASGITransport(app=client.app))
    client.post("/product", json={
        "name": "Desk Lamp", "quantity": 3, "price": 24.5, "description": "Warm light", "category": "lighting",
    })
    client.post("/product", json={
        "name": "Chair", "quantity": 1, "price": 80, "description": "Oak", "category": "furniture",
    })

    page = asyncio.run(c.list_products_async(search="lamp", limit=5))
    assert page["total"] == 1
    assert page["limit"] == 5
    assert page["data"][0]["name"] == "Desk Lamp"
