# app/router/inventory/assets_router.py
from typing import List
from fastapi import APIRouter

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import success_response
from ...enum.asset_enum import AssetStatus
from ...schemas.inventory.assets_schemas import (
    ActivityLogEntry, Asset, AssetActivityLogRequest, AssetIngestRequest, DepreciationRequest)
from ...services.inventory import assets_services, depreciation_services

router = APIRouter(
    prefix="/api/assets",
    tags=["assets"],
)


@router.post("/ingest", response_model=List[Asset])
def ingest_assets(params: AssetIngestRequest):
    return assets_services.ingest_assets(params.assets, params.categories)


@router.post("/depreciation", response_model=None)
def asset_depreciation(params: DepreciationRequest):
    result = depreciation_services.calculate_depreciation(
        params.asset, params.useful_life_years, params.as_of)
    if result is None:
        return success_response(data=None, message="Asset has no complete purchase record")
    return success_response(data=result, message="Depreciation calculated")


@router.post("/activity-log", response_model=List[ActivityLogEntry])
def asset_activity_log(params: AssetActivityLogRequest):
    return assets_services.sorted_activity_log(params.asset)


@router.get("/status-lookup", response_model=List[Lookup])
def status_lookup():
    return [
        Lookup(id=status.value, name=status.name.replace("_", " ").capitalize())
        for status in AssetStatus
    ]
