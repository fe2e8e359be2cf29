from datetime import date, datetime, timezone

from shared.exporthelper import export_to_excel
from shared.helpers.date_helper import parse_datetime_or_now, safe_parse_datetime
from asset_service.app.schemas.inventory.assets_schemas import Asset


def test_empty_strings_become_defaults():
    asset = Asset(**{"id": "A1", "name": " ONT ", "brand": "", "status": "in_use",
                     "serial_number": "\u200eSN-01\u200f", "purchase_price": ""})

    assert asset.name == "ONT"
    assert asset.brand is None
    assert asset.serial_number == "SN-01"
    assert asset.purchase_price is None


def test_safe_parse_datetime_variants():
    assert safe_parse_datetime("2024-03-10T09:30:00Z") == datetime(2024, 3, 10, 9, 30, tzinfo=timezone.utc)
    assert safe_parse_datetime("2024-03-10") == datetime(2024, 3, 10, tzinfo=timezone.utc)
    assert safe_parse_datetime(date(2024, 3, 10)) == datetime(2024, 3, 10, tzinfo=timezone.utc)
    assert safe_parse_datetime("") is None
    assert safe_parse_datetime("definitely not a date") is None
    assert safe_parse_datetime(12345) is None


def test_parse_datetime_or_now_flags_recovery():
    now = datetime(2030, 1, 1, tzinfo=timezone.utc)

    parsed, recovered = parse_datetime_or_now("2024-03-10", now)
    fallback, fallback_recovered = parse_datetime_or_now(None, now)

    assert recovered is False
    assert parsed.year == 2024
    assert fallback == now
    assert fallback_recovered is True


def test_export_applies_column_map_in_order():
    rows = [{"name": "ONT", "total": 3, "extra": "x"}, {"name": "Router"}]

    result = export_to_excel(rows, filename="stock.xlsx", column_map={"name": "Item Name", "total": "Total"})

    assert result.filename == "stock.xlsx"
    assert list(result.data[0].keys()) == ["Item Name", "Total"]
    assert result.data[0]["Total"] == 3
    assert result.data[1]["Total"] is None


def test_export_of_nothing():
    assert export_to_excel([], column_map={"name": "Item Name"}).data == []
