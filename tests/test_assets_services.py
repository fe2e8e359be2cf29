from asset_service.app.enum.asset_enum import TrackingMethod
from asset_service.app.schemas.customers.customer_activity_schemas import Maintenance
from asset_service.app.schemas.inventory.assets_schemas import AssetCategory
from asset_service.app.services.customers.maintenance_services import build_maintenance_detail
from asset_service.app.services.inventory import assets_services

CATEGORIES = [
    AssetCategory(**{
        "id": 1,
        "name": "Fiber Material",
        "types": [{"id": 10, "name": "Cable", "tracking_method": "bulk", "unit_of_measure": "Meter"}],
    }),
    AssetCategory(**{
        "id": 2,
        "name": "CPE",
        "types": [{"id": 20, "name": "ONT", "tracking_method": "individual", "unit_of_measure": "Unit"}],
    }),
]


def test_tracking_method_from_category(make_asset):
    cable = make_asset(name="Dropcore", category="Fiber Material", type="Cable")
    ont = make_asset(name="HG8245H", category="CPE", type="ONT")

    assert assets_services.resolve_tracking_method(cable, CATEGORIES) == TrackingMethod.bulk
    assert assets_services.resolve_tracking_method(ont, CATEGORIES) == TrackingMethod.individual


def test_tracking_method_falls_back_to_balance_fields(make_asset):
    unknown_bulk = make_asset(name="Cable Tie", category="Misc", type="Consumable", current_balance=80)
    unknown_unit = make_asset(name="Switch", category="Misc", type="Switch")

    assert assets_services.resolve_tracking_method(unknown_bulk, CATEGORIES) == TrackingMethod.bulk
    assert assets_services.resolve_tracking_method(unknown_unit, CATEGORIES) == TrackingMethod.individual


def test_ingest_clears_unit_identity_from_bulk_assets(make_asset):
    cable = make_asset(name="Dropcore", category="Fiber Material", type="Cable",
                       serial_number="SN-1", mac_address="AA:BB")
    ont = make_asset(name="HG8245H", category="CPE", type="ONT", serial_number="SN-2")

    ingested = assets_services.ingest_assets([cable, ont], CATEGORIES)

    assert ingested[0].tracking_method == TrackingMethod.bulk
    assert ingested[0].serial_number is None
    assert ingested[0].mac_address is None
    assert ingested[0].unit_of_measure == "Meter"
    assert ingested[1].serial_number == "SN-2"
    # inputs are left untouched
    assert cable.serial_number == "SN-1"
    assert cable.tracking_method is None


def test_activity_log_sorted_newest_first(make_asset):
    asset = make_asset(activity_log=[
        {"id": "1", "timestamp": "2024-01-01T10:00:00Z", "action": "Registered"},
        {"id": "2", "timestamp": "2024-03-01T10:00:00Z", "action": "Handover"},
        {"id": "3", "timestamp": "garbage", "action": "Unknown"},
        {"id": "4", "timestamp": "2024-02-01T10:00:00Z", "action": "Installed"},
    ])

    assert [e.id for e in assets_services.sorted_activity_log(asset)] == ["2", "4", "1", "3"]


def test_missing_asset_reference_is_a_placeholder(make_asset):
    assets = [make_asset(id="AST-1")]

    found = assets_services.find_asset_reference("AST-1", assets)
    missing = assets_services.find_asset_reference("AST-404", assets)

    assert found.found is True
    assert found.name == "Router Core RB4011"
    assert missing.found is False
    assert missing.id == "AST-404"
    assert missing.name == assets_services.ASSET_NOT_FOUND


def test_maintenance_detail_resolves_references(make_asset):
    assets = [make_asset(id="OLD-1", status="in_use"), make_asset(id="PATCH-1", name="Patchcord")]
    maintenance = Maintenance(**{
        "id": "M1",
        "doc_number": "WO-MT-20240310-0001",
        "replacements": [{"old_asset_id": "OLD-1", "new_asset_id": "NEW-9", "retrieved_asset_condition": "major_damage"}],
        "materials_used": [
            {"material_asset_id": "PATCH-1", "item_name": "Patchcord", "quantity": 2},
            {"item_name": "Cable Tie", "quantity": 10, "unit": "Pcs"},
        ],
    })

    detail = build_maintenance_detail(maintenance, assets)

    assert detail.title == "Device Replacement"
    assert detail.replacements[0].old_asset.found is True
    assert detail.replacements[0].new_asset.found is False
    assert detail.materials[0].asset.name == "Patchcord"
    assert detail.materials[1].asset is None
    assert detail.materials[1].quantity == 10
