import pytest
from fastapi.testclient import TestClient

from asset_service.app.main import app
from asset_service.app.schemas.inventory.assets_schemas import Asset


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_asset():
    counter = {"n": 0}

    def _make(name="Router Core RB4011", brand="Mikrotik", status="in_storage", **kwargs):
        counter["n"] += 1
        data = {
            "id": kwargs.pop("id", f"AST-{counter['n']:03d}"),
            "name": name,
            "brand": brand,
            "category": kwargs.pop("category", "Network Devices"),
            "status": status,
        }
        data.update(kwargs)
        return Asset(**data)

    return _make


@pytest.fixture
def stock_assets(make_asset):
    return [
        make_asset(status="in_storage", purchase_price=5_000_000, unit_of_measure="Unit"),
        make_asset(status="in_storage", purchase_price=4_500_000),
        make_asset(status="in_use", purchase_price=5_000_000),
        make_asset(status="damaged"),
        make_asset(status="under_repair"),
        make_asset(name="ONT HG8245H", brand="Huawei", category="CPE", status="in_use"),
        make_asset(name="ONT HG8245H", brand="Huawei", category="CPE", status="in_storage"),
        make_asset(name="Dropcore Cable", brand="FiberHome", category="Fiber Material",
                   status="in_storage", purchase_price=None),
    ]
