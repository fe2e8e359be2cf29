ASSETS = [
    {"id": "A1", "name": "ONT HG8245H", "brand": "Huawei", "category": "CPE", "status": "in_storage", "purchase_price": 750000},
    {"id": "A2", "name": "ONT HG8245H", "brand": "Huawei", "category": "CPE", "status": "in_use"},
    {"id": "A3", "name": "Router Core RB4011", "brand": "Mikrotik", "category": "Network Devices", "status": "in_storage"},
    {"id": "A4", "name": "Router Core RB4011", "brand": "Mikrotik", "category": "Network Devices", "status": "in_storage"},
    {"id": "A5", "name": "Splitter 1:8", "brand": "FiberHome", "category": "Fiber Material", "status": "damaged"},
]


def test_health_is_wrapped(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Success"
    assert body["data"] == {"status": "healthy"}


def test_stock_summary_sorted(client):
    response = client.post("/api/stock/summary", json={
        "assets": ASSETS, "sort_key": "in_storage", "direction": "descending"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert [i["name"] for i in data] == ["Router Core RB4011", "ONT HG8245H", "Splitter 1:8"]
    assert data[1]["value_in_storage"] == 750000
    assert data[2]["damaged"] == 1


def test_stock_summary_bad_sort_key(client):
    response = client.post("/api/stock/summary", json={"assets": ASSETS, "sort_key": "colour"})

    assert response.status_code == 400
    assert response.json()["status"] == "Failure"


def test_stock_analysis_and_restock(client):
    analysis = client.post("/api/stock/analysis", json={
        "assets": ASSETS, "thresholds": {"ONT HG8245H|Huawei": 0}}).json()["data"]

    assert analysis["total_critical"] == 1
    assert [i["name"] for i in analysis["low_items"]] == ["Router Core RB4011"]

    restock = client.post("/api/stock/restock", json={"assets": ASSETS, "target": 4}).json()["data"]
    assert {p["name"]: p["quantity"] for p in restock} == {
        "Splitter 1:8": 4, "ONT HG8245H": 3, "Router Core RB4011": 2}


def test_request_staging(client):
    response = client.post("/api/requests/staging", json={
        "id": "RO-1",
        "items": [{"id": 1, "item_name": "ONT", "quantity": 10}, {"id": 2, "item_name": "Router", "quantity": 1}],
        "item_statuses": {"2": {"status": "rejected"}},
        "partially_registered_items": {"1": 12},
    })

    data = response.json()["data"]
    assert [i["item_id"] for i in data["items"]] == [1]
    assert data["items"][0]["remaining_quantity"] == 0
    assert data["is_fully_registered"] is True


def test_registration_check_over_remaining(client):
    response = client.post("/api/requests/registration-check", json={
        "request": {"id": "RO-1", "items": [{"id": 1, "item_name": "ONT", "quantity": 5}],
                    "partially_registered_items": {"1": 4}},
        "item_id": 1,
        "quantity": 2,
    })

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "Failure"
    assert body["status_code"] == "300"


def test_registration_check_accepts(client):
    response = client.post("/api/requests/registration-check", json={
        "request": {"id": "RO-1", "items": [{"id": 1, "item_name": "ONT", "quantity": 5}],
                    "partially_registered_items": {"1": 4}},
        "item_id": 1,
        "quantity": 1,
    })

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["item"]["remaining_quantity"] == 1
    assert data["remaining_after"] == 0


def test_registration_check_unknown_item(client):
    response = client.post("/api/requests/registration-check", json={
        "request": {"id": "RO-1", "items": []}, "item_id": 9, "quantity": 1})

    assert response.status_code == 404
    assert response.json()["status_code"] == "302"


def test_customer_activities(client):
    response = client.post("/api/customers/C1/activities", json={
        "installations": [{"id": "I1", "customer_id": "C1", "installation_date": "2024-01-01"}],
        "maintenances": [{"id": "M1", "customer_id": "C1", "maintenance_date": "2024-02-01",
                          "materials_used": [{"item_name": "Patchcord"}]}],
        "dismantles": [{"id": "D1", "customer_id": "C2", "dismantle_date": "2024-03-01"}],
    })

    data = response.json()["data"]
    assert [a["target"]["id"] for a in data] == ["M1", "I1"]
    assert data[0]["title"] == "Material Addition"


def test_next_document_number(client):
    response = client.post("/api/documents/next-number", json={
        "prefix": "MNT", "existing_doc_numbers": ["WO-MT-20240305-0001", ""], "doc_date": "2024-03-05"})

    assert response.json()["data"]["doc_number"] == "WO-MT-20240305-0002"


def test_depreciation_endpoint(client):
    asset = {"id": "A1", "name": "OLT", "purchase_price": 12000000, "purchase_date": "2024-01-15"}

    result = client.post("/api/assets/depreciation", json={
        "asset": asset, "useful_life_years": 3, "as_of": "2025-07-15"}).json()
    missing = client.post("/api/assets/depreciation", json={"asset": {"id": "A2", "name": "ONT"}}).json()

    assert result["data"]["months_passed"] == 18
    assert result["data"]["is_fully_depreciated"] is False
    assert missing["status"] == "Success"
    assert missing["data"] is None


def test_status_lookup(client):
    data = client.get("/api/assets/status-lookup").json()["data"]

    assert {"id": "in_storage", "name": "In storage"} in data


def test_validation_error_is_wrapped(client):
    response = client.post("/api/requests/registration-check", json={"item_id": 1})

    assert response.status_code == 422
    assert response.json()["status_code"] == "200"


def test_export_stock(client):
    data = client.post("/api/export/stock", json={"assets": ASSETS}).json()["data"]

    assert data["filename"].startswith("stock_")
    assert data["data"][0]["Item Name"] == "ONT HG8245H"
    assert data["data"][0]["In Storage"] == 1


def test_depreciation_endpoint_rejects_non_positive_life(client):
    asset = {"id": "A1", "name": "OLT", "purchase_price": 12000000, "purchase_date": "2024-01-15"}

    response = client.post("/api/assets/depreciation", json={"asset": asset, "useful_life_years": 0})

    assert response.status_code == 422
