import pytest
from fastapi.testclient import TestClient

from inventory.config import Settings
from inventory.main import create_app
from inventory.models import Product
from inventory.repository import ProductRepository
from inventory.service import ProductService
from inventory.storage import ProductFileStore


def make_fields(name="Widget", quantity=5, price=9.99, description="A useful thing", category="tools"):
    return {"name": name, "quantity": quantity, "price": price, "description": description, "category": category}


def make_product(product_id, **overrides):
    return Product(id=product_id, **make_fields(**overrides))


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "product.json"


@pytest.fixture
def service(data_file):
    svc = ProductService(ProductRepository(), ProductFileStore(data_file))
    svc.initialize()
    return svc


@pytest.fixture
def settings(data_file):
    return Settings(data_file=data_file)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c
