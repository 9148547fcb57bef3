# tests/test_service.py
import json
import logging
import uuid

import pytest

from inventory.errors import NOT_FOUND_MESSAGE, ProductNotFoundError
from inventory.models import ProductQuery
from inventory.repository import ProductRepository
from inventory.service import DELETE_SUCCESS_MESSAGE, ProductService
from inventory.storage import ProductFileStore

from conftest import make_fields


def test_initialize_creates_missing_file(data_file, service):
    assert data_file.exists()
    assert json.loads(data_file.read_text(encoding="utf-8")) == []
    assert len(service.repository) == 0


def test_create_then_get_returns_fields_plus_id(service):
    fields = make_fields()
    created = service.create(fields).data
    uuid.UUID(created.id)

    fetched = service.get(created.id).data
    assert fetched.model_dump() == {**fields, "id": created.id}


def test_create_ignores_caller_supplied_id(service):
    created = service.create({**make_fields(), "id": "mine"}).data
    assert created.id != "mine"
    assert "mine" not in service.repository


def test_ids_are_unique(service):
    ids = {service.create(make_fields(name=f"p{i}")).data.id for i in range(50)}
    assert len(ids) == 50


def test_get_missing_raises_not_found(service):
    with pytest.raises(ProductNotFoundError) as exc_info:
        service.get(str(uuid.uuid4()))
    assert str(exc_info.value) == NOT_FOUND_MESSAGE


def test_delete_removes_record(service):
    created = service.create(make_fields()).data
    result = service.delete(created.id)
    assert result.data.message == DELETE_SUCCESS_MESSAGE
    with pytest.raises(ProductNotFoundError):
        service.get(created.id)


def test_delete_missing_raises_not_found(service):
    service.create(make_fields())
    with pytest.raises(ProductNotFoundError):
        service.delete(str(uuid.uuid4()))
    assert len(service.repository) == 1


def test_update_missing_raises_and_changes_nothing(service):
    created = service.create(make_fields()).data
    with pytest.raises(ProductNotFoundError):
        service.update(str(uuid.uuid4()), {"name": "Other"})
    assert [p.model_dump() for p in service.repository.snapshot_all()] == [created.model_dump()]


def test_partial_update_only_touches_supplied_fields(service):
    created = service.create(make_fields(name="Widget", price=9.99)).data
    updated = service.update(created.id, {"price": 12.5, "id": "hijack"}).data

    assert updated.id == created.id
    assert updated.price == 12.5
    assert updated.name == "Widget"
    assert updated.quantity == created.quantity
    assert service.get(created.id).data == updated
    assert "hijack" not in service.repository


def test_list_envelope_reports_filtered_total(service):
    for name in ("Widget A", "Gadget B", "widget C"):
        service.create(make_fields(name=name))
    result = service.list(ProductQuery(search="widget"))
    assert sorted(p.name for p in result.data) == ["Widget A", "widget C"]
    assert result.total == 2
    assert result.page == 1
    assert result.limit == 10


def test_list_reflects_latest_mutations(service):
    created = service.create(make_fields(name="Old"))
    service.update(created.data.id, {"name": "New"})
    assert [p.name for p in service.list(ProductQuery()).data] == ["New"]


def test_round_trip_through_file(data_file, service):
    for i in range(3):
        service.create(make_fields(name=f"p{i}", quantity=i + 1, price=1.5 * (i + 1)))
    before = {p.id: p.model_dump() for p in service.repository.snapshot_all()}
    service.shutdown()

    reloaded = ProductService(ProductRepository(), ProductFileStore(data_file))
    reloaded.initialize()
    after = {p.id: p.model_dump() for p in reloaded.repository.snapshot_all()}
    assert after == before


def test_shutdown_writes_pretty_printed_array(data_file, service):
    service.create(make_fields())
    service.shutdown()
    text = data_file.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert set(json.loads(text)[0]) == {"id", "name", "quantity", "price", "description", "category"}


@pytest.mark.parametrize("content", [
    "not json at all",
    '{"id": "x"}',
    '[{"id": "x", "name": "missing the rest"}]',
    '[{"id": "x", "name": "", "quantity": 1, "price": 1, "description": "d", "category": "c"}]',
])
def test_malformed_store_starts_empty(data_file, content, caplog):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(content, encoding="utf-8")
    svc = ProductService(ProductRepository(), ProductFileStore(data_file))

    with caplog.at_level(logging.ERROR, logger="inventory.service"):
        svc.initialize()

    assert len(svc.repository) == 0
    assert "Failed to load products" in caplog.text


def test_load_keeps_existing_records(data_file):
    data_file.parent.mkdir(parents=True)
    records = [{"id": "abc", **make_fields(name="Stored")}]
    data_file.write_text(json.dumps(records), encoding="utf-8")

    svc = ProductService(ProductRepository(), ProductFileStore(data_file))
    svc.initialize()
    assert svc.get("abc").data.name == "Stored"


def test_malformed_store_warns_the_file_will_be_replaced(data_file, caplog):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("[{", encoding="utf-8")
    svc = ProductService(ProductRepository(), ProductFileStore(data_file))

    with caplog.at_level(logging.ERROR, logger="inventory.service"):
        svc.initialize()

    assert "replaced on shutdown" in caplog.text


def test_fractional_quantities_survive_load_and_flush(data_file):
    data_file.parent.mkdir(parents=True)
    records = [
        {"id": "whole", **make_fields(name="Bolts", quantity=3)},
        {"id": "part", **make_fields(name="Cable (m)", quantity=0.5)},
    ]
    data_file.write_text(json.dumps(records), encoding="utf-8")

    svc = ProductService(ProductRepository(), ProductFileStore(data_file))
    svc.initialize()
    assert svc.get("part").data.quantity == 0.5
    assert len(svc.repository) == 2

    svc.shutdown()
    stored = {p["id"]: p for p in json.loads(data_file.read_text(encoding="utf-8"))}
    assert stored["part"]["quantity"] == 0.5
    assert stored["whole"]["name"] == "Bolts"


def test_duplicate_ids_in_store_keep_the_last_record(data_file):
    data_file.parent.mkdir(parents=True)
    records = [
        {"id": "dup", **make_fields(name="First")},
        {"id": "dup", **make_fields(name="Second")},
    ]
    data_file.write_text(json.dumps(records), encoding="utf-8")

    svc = ProductService(ProductRepository(), ProductFileStore(data_file))
    svc.initialize()
    assert len(svc.repository) == 1
    assert svc.get("dup").data.name == "Second"


def test_unwritable_data_directory_is_fatal(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    svc = ProductService(ProductRepository(), ProductFileStore(blocker / "data" / "product.json"))

    with pytest.raises(OSError):
        svc.initialize()


def test_create_trusts_already_validated_fields(service):
    # boundary validation happens in the request schema, not here
    created = service.create(make_fields(quantity=2.5)).data
    assert created.quantity == 2.5
    assert service.get(created.id).data.quantity == 2.5
