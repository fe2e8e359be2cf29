# app/schemas/inventory/stock_schemas.py
from pydantic import BaseModel
from typing import Dict, List, Optional, Union
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.asset_enum import MovementType, SortDirection, TrackingMethod
from .assets_schemas import Asset


class StockItem(BaseModel):
    key: str
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    unit_of_measure: Optional[str] = None
    tracking_method: Optional[TrackingMethod] = None
    in_storage: int = 0
    in_use: int = 0
    damaged: int = 0
    total: int = 0
    value_in_storage: float = 0

    model_config = {"from_attributes": True}


class StockAlertItem(BaseModel):
    key: str
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    count: int
    threshold: int


class StockAnalysis(BaseModel):
    critical_items: List[StockAlertItem]
    low_items: List[StockAlertItem]
    total_critical: int
    total_low: int


class RestockProposal(BaseModel):
    key: str
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    current_stock: int
    target_stock: int
    quantity: int
    note: str


class StockMovement(EmptyStringModel):
    id: Optional[str] = None
    asset_name: str
    brand: Optional[str] = None
    movement_date: Optional[Union[datetime, str]] = None
    movement_type: MovementType
    quantity: float = 1
    reference_id: Optional[str] = None
    actor: Optional[str] = None
    notes: Optional[str] = None
    balance_after: float = 0


class StockSummaryRequest(EmptyStringModel):
    assets: List[Asset] = []
    search: Optional[str] = None
    category: Optional[str] = None
    sort_key: Optional[str] = None
    direction: SortDirection = SortDirection.ascending


class StockAnalysisRequest(EmptyStringModel):
    assets: List[Asset] = []
    thresholds: Dict[str, int] = {}


class RestockRequest(StockAnalysisRequest):
    target: Optional[int] = None


class StockItemAssetsRequest(EmptyStringModel):
    assets: List[Asset] = []
    name: str
    brand: Optional[str] = None
    status: Optional[str] = None


class StockHistoryRequest(EmptyStringModel):
    movements: List[StockMovement] = []
    name: str
    brand: Optional[str] = None
