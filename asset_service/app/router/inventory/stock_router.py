# app/router/inventory/stock_router.py
from typing import List
from fastapi import APIRouter

from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ...schemas.inventory.assets_schemas import Asset
from ...schemas.inventory.stock_schemas import (
    RestockProposal, RestockRequest, StockAnalysis, StockAnalysisRequest, StockHistoryRequest,
    StockItem, StockItemAssetsRequest, StockMovement, StockSummaryRequest)
from ...services.inventory import stock_services, stock_movement_services

router = APIRouter(
    prefix="/api/stock",
    tags=["stock"],
)


@router.post("/summary", response_model=List[StockItem])
def stock_summary(params: StockSummaryRequest):
    items = stock_services.aggregate_stock(params.assets)
    items = stock_services.filter_stock_items(
        items, params.search, params.category)
    try:
        return stock_services.sort_stock_items(items, params.sort_key, params.direction)
    except ValueError as e:
        return error_response(
            message=str(e),
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )


@router.post("/analysis", response_model=StockAnalysis)
def stock_analysis(params: StockAnalysisRequest):
    return stock_services.analyze_stock_levels(params.assets, params.thresholds)


@router.post("/restock", response_model=List[RestockProposal])
def restock_proposals(params: RestockRequest):
    analysis = stock_services.analyze_stock_levels(
        params.assets, params.thresholds)
    return stock_services.propose_restock(
        analysis.critical_items + analysis.low_items, params.target)


@router.post("/items/assets", response_model=List[Asset])
def stock_item_assets(params: StockItemAssetsRequest):
    return stock_services.stock_item_assets(params.assets, params.name, params.brand, params.status)


@router.post("/history", response_model=List[StockMovement])
def stock_history(params: StockHistoryRequest):
    return stock_movement_services.get_stock_history(params.movements, params.name, params.brand)


@router.post("/ledger", response_model=List[StockMovement])
def stock_ledger(params: StockHistoryRequest):
    return stock_movement_services.recalculate_ledger(params.movements, params.name, params.brand)
