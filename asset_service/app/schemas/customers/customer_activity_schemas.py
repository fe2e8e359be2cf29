# app/schemas/customers/customer_activity_schemas.py
from pydantic import BaseModel
from typing import Dict, List, Optional, Union
from datetime import date, datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.asset_enum import ActivityType
from ..inventory.assets_schemas import Asset, AssetReference


class MaterialUsage(EmptyStringModel):
    material_asset_id: Optional[str] = None
    item_name: Optional[str] = None
    brand: Optional[str] = None
    quantity: float = 1
    unit: Optional[str] = None


class MaintenanceReplacement(EmptyStringModel):
    old_asset_id: Optional[str] = None
    new_asset_id: Optional[str] = None
    retrieved_asset_condition: Optional[str] = None


class Installation(EmptyStringModel):
    id: str
    doc_number: Optional[str] = None
    customer_id: Optional[str] = None
    installation_date: Optional[Union[datetime, str]] = None
    technician: Optional[str] = None
    materials_used: List[MaterialUsage] = []


class Maintenance(EmptyStringModel):
    id: str
    doc_number: Optional[str] = None
    customer_id: Optional[str] = None
    maintenance_date: Optional[Union[datetime, str]] = None
    technician: Optional[str] = None
    problem_description: Optional[str] = None
    status: Optional[str] = None
    replacements: Optional[List[MaintenanceReplacement]] = None
    materials_used: Optional[List[MaterialUsage]] = None


class Dismantle(EmptyStringModel):
    id: str
    doc_number: Optional[str] = None
    customer_id: Optional[str] = None
    dismantle_date: Optional[Union[datetime, str]] = None
    technician: Optional[str] = None
    asset_id: Optional[str] = None
    asset_name: Optional[str] = None


class NavigationTarget(BaseModel):
    page: str
    id: str


class CustomerActivity(BaseModel):
    activity_date: datetime
    activity_type: ActivityType
    title: str
    doc_number: Optional[str] = None
    details: Dict[str, Optional[str]] = {}
    target: NavigationTarget
    date_recovered: bool = False


class CustomerActivityRequest(EmptyStringModel):
    installations: List[Installation] = []
    maintenances: List[Maintenance] = []
    dismantles: List[Dismantle] = []


class ReplacementDetail(BaseModel):
    old_asset: AssetReference
    new_asset: AssetReference
    retrieved_asset_condition: Optional[str] = None


class MaterialDetail(BaseModel):
    asset: Optional[AssetReference] = None
    item_name: Optional[str] = None
    brand: Optional[str] = None
    quantity: float
    unit: Optional[str] = None


class MaintenanceDetail(BaseModel):
    id: str
    doc_number: Optional[str] = None
    title: str
    replacements: List[ReplacementDetail] = []
    materials: List[MaterialDetail] = []


class MaintenanceDetailRequest(EmptyStringModel):
    maintenance: Maintenance
    assets: List[Asset] = []


class DocumentNumberRequest(EmptyStringModel):
    prefix: str
    existing_doc_numbers: List[Optional[str]] = []
    doc_date: Optional[date] = None


class DocumentNumberOut(BaseModel):
    doc_number: str
