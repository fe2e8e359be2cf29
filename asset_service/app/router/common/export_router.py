# app/router/common/export_router.py
from datetime import datetime
from fastapi import APIRouter

from shared.core.schemas import ExportResponse
from shared.exporthelper import export_to_excel
from ...schemas.inventory.stock_schemas import StockSummaryRequest
from ...services.inventory import stock_services

router = APIRouter(
    prefix="/api/export",
    tags=["Export"],
)

STOCK_COLUMNS = {
    "name": "Item Name",
    "brand": "Brand",
    "category": "Category",
    "in_storage": "In Storage",
    "in_use": "In Use",
    "damaged": "Damaged",
    "total": "Total",
    "unit_of_measure": "Unit",
    "value_in_storage": "Stock Value",
}


@router.post("/stock", response_model=ExportResponse)
def export_stock(params: StockSummaryRequest):
    items = stock_services.aggregate_stock(params.assets)
    items = stock_services.filter_stock_items(
        items, params.search, params.category)
    rows = [item.model_dump() for item in items]
    return export_to_excel(
        rows,
        filename=f"stock_{datetime.now():%Y%m%d}.xlsx",
        column_map=STOCK_COLUMNS,
    )
