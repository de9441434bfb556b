import pytest

from deposit_api.errors import UnknownReferenceError, ValidationError
from deposit_api.models.product import Product
from deposit_api.services.product_service import (
    ProductService,
    validate_product_input,
)
from deposit_api.utils.clock import utc_timestamp


class UntouchableSession:
    """Fails the test if anything reaches storage."""

    def __getattr__(self, name):
        raise AssertionError(f"storage was used: {name}")


VALID = {
    "name": "Pepsi Max",
    "packaging": "pet",
    "deposit": 200,
    "volume": 1500,
    "companyId": 2,
    "registeredById": 2,
}


def test_list_validation_happens_before_io():
    svc = ProductService(UntouchableSession())
    with pytest.raises(ValidationError):
        svc.list_products({"sort": "foo"})
    with pytest.raises(ValidationError):
        svc.list_products({"page": "0"})


def test_create_validation_happens_before_io():
    svc = ProductService(UntouchableSession())
    with pytest.raises(ValidationError) as exc:
        svc.create_product(dict(VALID, name="   "))
    assert exc.value.message == "Name is required and must be a non-empty string"


def test_validate_accepts_valid_payload():
    assert validate_product_input(VALID) == []


def test_validate_rejects_non_mapping():
    assert validate_product_input(["not", "an", "object"]) == ["Request body must be a JSON object"]


def test_validate_rejects_strings_and_bools_as_numbers():
    errors = validate_product_input(dict(VALID, deposit="25", volume=False, companyId="1"))
    assert errors == [
        "Deposit must be a positive number",
        "Volume must be a positive number",
        "Company ID is required and must be a number",
    ]


def test_create_ignores_client_active_flag(db, seeded):
    svc = ProductService(db)
    p = svc.create_product(dict(VALID, active=True))
    assert p.active is False
    assert p.id is not None
    assert db.get(Product, p.id).packaging == "pet"


def test_create_checks_company_then_user(db, seeded):
    svc = ProductService(db)
    with pytest.raises(UnknownReferenceError) as exc:
        svc.create_product(dict(VALID, companyId=404, registeredById=404))
    assert exc.value.message == "Company not found"
    with pytest.raises(UnknownReferenceError) as exc:
        svc.create_product(dict(VALID, registeredById=404))
    assert exc.value.message == "User not found"


def test_list_products_returns_summary(db, seeded):
    items, pagination = ProductService(db).list_products({"limit": "4"})
    assert len(items) == 4
    assert pagination.total_items == 5
    assert pagination.total_pages == 2


def test_utc_timestamp_format():
    stamp = utc_timestamp()
    # 2025-01-01T12:00:00.000Z
    assert len(stamp) == 24
    assert stamp[10] == "T"
    assert stamp.endswith("Z")


def test_validate_rejects_integers_outside_storage_range():
    errors = validate_product_input(dict(VALID, deposit=2 ** 63, registeredById=-(2 ** 63) - 1))
    assert errors == [
        "Deposit must be a positive number",
        "Registered by ID is required and must be a number",
    ]
    assert validate_product_input(dict(VALID, deposit=2 ** 63 - 1)) == []


def test_create_delays_only_after_reference_checks(db, seeded, monkeypatch):
    calls = []
    monkeypatch.setattr(
        "deposit_api.services.product_service.simulate_network_delay",
        lambda *args: calls.append(args),
    )
    svc = ProductService(db)
    with pytest.raises(UnknownReferenceError):
        svc.create_product(dict(VALID, companyId=404))
    assert calls == []

    svc.create_product(VALID)
    assert calls == [(300, 1000)]
