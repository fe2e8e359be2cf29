# app/services/inventory/assets_services.py
import logging
from typing import Iterable, List, Optional

from shared.helpers.date_helper import safe_parse_datetime
from ...enum.asset_enum import TrackingMethod
from ...schemas.inventory.assets_schemas import (
    ActivityLogEntry, Asset, AssetCategory, AssetReference, AssetType)

logger = logging.getLogger(__name__)

ASSET_NOT_FOUND = "Asset not found"


def find_asset_type(asset: Asset, categories: Iterable[AssetCategory]) -> Optional[AssetType]:
    if not asset.category or not asset.type:
        return None
    category = next((c for c in categories if c.name == asset.category), None)
    if category is None:
        return None
    return next((t for t in category.types if t.name == asset.type), None)


def resolve_tracking_method(asset: Asset, categories: Iterable[AssetCategory]) -> TrackingMethod:
    asset_type = find_asset_type(asset, categories)
    if asset_type is not None:
        return asset_type.tracking_method

    # Category lookup failed; bulk assets are the ones carrying a balance
    if asset.initial_balance is not None or asset.current_balance is not None:
        return TrackingMethod.bulk
    return TrackingMethod.individual


def ingest_assets(raw_assets: Iterable[Asset], categories: Iterable[AssetCategory]) -> List[Asset]:
    """
    Resolve the tracking method of every asset once, as it enters the service.
    Bulk assets lose their serial number and MAC address, which only identify
    individual units.
    """
    categories = list(categories)
    ingested = []
    for asset in raw_assets:
        tracking_method = resolve_tracking_method(asset, categories)
        update = {"tracking_method": tracking_method}

        asset_type = find_asset_type(asset, categories)
        if asset_type is not None and not asset.unit_of_measure:
            update["unit_of_measure"] = asset_type.unit_of_measure

        if tracking_method == TrackingMethod.bulk:
            update["serial_number"] = None
            update["mac_address"] = None

        ingested.append(asset.model_copy(update=update))

    logger.debug("Ingested %d assets", len(ingested))
    return ingested


def sorted_activity_log(asset: Asset) -> List[ActivityLogEntry]:
    """Activity log newest first. Entries with unreadable timestamps go last."""
    def sort_key(entry: ActivityLogEntry):
        parsed = safe_parse_datetime(entry.timestamp)
        return (parsed is not None, parsed.timestamp() if parsed else 0)

    return sorted(asset.activity_log, key=sort_key, reverse=True)


def to_reference(asset: Asset) -> AssetReference:
    return AssetReference(id=asset.id, name=asset.name, brand=asset.brand, status=asset.status)


def find_asset_reference(asset_id: Optional[str], assets: Iterable[Asset]) -> AssetReference:
    asset = next((a for a in assets if a.id == asset_id), None) if asset_id else None
    if asset is None:
        return AssetReference(id=asset_id, name=ASSET_NOT_FOUND, found=False)
    return to_reference(asset)
