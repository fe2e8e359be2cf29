# app/schemas/inventory/assets_schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import date, datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.asset_enum import TrackingMethod


class ActivityLogEntry(EmptyStringModel):
    id: Optional[str] = None
    timestamp: Optional[Union[datetime, str]] = None
    user: Optional[str] = None
    action: str
    details: Optional[str] = None


class Asset(EmptyStringModel):
    id: str
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    serial_number: Optional[str] = None
    mac_address: Optional[str] = None
    tracking_method: Optional[TrackingMethod] = None
    unit_of_measure: Optional[str] = None
    status: Optional[str] = None
    condition: Optional[str] = None
    location: Optional[str] = None
    current_user: Optional[str] = None
    purchase_price: Optional[float] = None
    purchase_date: Optional[Union[date, datetime]] = None
    registration_date: Optional[Union[datetime, str]] = None
    initial_balance: Optional[float] = None
    current_balance: Optional[float] = None
    activity_log: List[ActivityLogEntry] = []

    model_config = {"from_attributes": True}


class AssetType(EmptyStringModel):
    id: Optional[Union[int, str]] = None
    name: str
    tracking_method: TrackingMethod = TrackingMethod.individual
    unit_of_measure: Optional[str] = None


class AssetCategory(EmptyStringModel):
    id: Optional[Union[int, str]] = None
    name: str
    types: List[AssetType] = []


class AssetReference(BaseModel):
    id: Optional[str] = None
    name: str
    brand: Optional[str] = None
    status: Optional[str] = None
    found: bool = True


class AssetIngestRequest(EmptyStringModel):
    assets: List[Asset] = []
    categories: List[AssetCategory] = []


class AssetActivityLogRequest(EmptyStringModel):
    asset: Asset


class DepreciationRequest(EmptyStringModel):
    asset: Asset
    useful_life_years: Optional[int] = Field(default=None, gt=0)
    as_of: Optional[date] = None


class DepreciationResult(BaseModel):
    asset_id: str
    initial_value: float
    useful_life_years: int
    months_passed: int
    monthly_depreciation: float
    current_value: float
    is_fully_depreciated: bool

    model_config = {"from_attributes": True}
