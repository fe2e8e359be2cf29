# app/services/inventory/stock_services.py
from typing import Dict, Iterable, List, Mapping, Optional

from shared.core.config import settings
from ...enum.asset_enum import AssetStatus, SortDirection
from ...schemas.inventory.assets_schemas import Asset
from ...schemas.inventory.stock_schemas import (
    RestockProposal, StockAlertItem, StockAnalysis, StockItem)


STATUS_BUCKETS = {
    AssetStatus.in_storage.value: "in_storage",
    AssetStatus.in_use.value: "in_use",
    AssetStatus.damaged.value: "damaged",
}


def stock_key(name: str, brand: Optional[str]) -> str:
    return f"{name}|{brand or ''}"


def aggregate_stock(assets: Iterable[Asset]) -> List[StockItem]:
    """
    Group assets by (name, brand) and count them per status.

    Groups come back in the order their first asset was seen. Statuses
    outside the tracked buckets still count towards ``total``.
    """
    stock_map: Dict[str, StockItem] = {}

    for asset in assets:
        key = stock_key(asset.name, asset.brand)
        item = stock_map.get(key)
        if item is None:
            item = StockItem(
                key=key,
                name=asset.name,
                brand=asset.brand,
                category=asset.category,
                unit_of_measure=asset.unit_of_measure,
                tracking_method=asset.tracking_method,
            )
            stock_map[key] = item

        item.total += 1
        bucket = STATUS_BUCKETS.get(asset.status)
        if bucket:
            setattr(item, bucket, getattr(item, bucket) + 1)

        if asset.status == AssetStatus.in_storage:
            item.value_in_storage += asset.purchase_price or 0

    return list(stock_map.values())


def sort_stock_items(items: List[StockItem], key: Optional[str], direction: SortDirection = SortDirection.ascending) -> List[StockItem]:
    if not key:
        return list(items)
    if key not in StockItem.model_fields:
        raise ValueError(f"Cannot sort stock by '{key}'")

    def sort_value(item: StockItem):
        value = getattr(item, key)
        # None sorts first; strings compare case-insensitively
        if value is None:
            return (0, "")
        if isinstance(value, str):
            return (1, value.lower())
        return (1, value)

    # sorted() is stable, also with reverse=True
    return sorted(items, key=sort_value, reverse=direction == SortDirection.descending)


def filter_stock_items(items: List[StockItem], search: Optional[str] = None, category: Optional[str] = None) -> List[StockItem]:
    result = items
    if search:
        term = search.lower()
        result = [
            i for i in result
            if term in i.name.lower() or term in (i.brand or "").lower()
        ]
    if category and category.lower() != "all":
        result = [i for i in result if i.category == category]
    return result


def stock_item_assets(assets: Iterable[Asset], name: str, brand: Optional[str], status: Optional[str] = None) -> List[Asset]:
    """The assets behind one stock row, optionally narrowed to a single status."""
    key = stock_key(name, brand)
    return [
        a for a in assets
        if stock_key(a.name, a.brand) == key
        and (not status or status.lower() == "all" or a.status == status)
    ]


def threshold_for(key: str, thresholds: Mapping[str, int]) -> int:
    threshold = thresholds.get(key)
    return settings.LOW_STOCK_DEFAULT if threshold is None else threshold


def _alert_item(item: StockItem, threshold: int) -> StockAlertItem:
    return StockAlertItem(
        key=item.key,
        name=item.name,
        brand=item.brand,
        category=item.category,
        count=item.in_storage,
        threshold=threshold,
    )


def analyze_stock_levels(assets: Iterable[Asset], thresholds: Mapping[str, int]) -> StockAnalysis:
    critical_items = []
    low_items = []

    for item in aggregate_stock(assets):
        threshold = threshold_for(item.key, thresholds)
        if item.in_storage == 0:
            critical_items.append(_alert_item(item, threshold))
        elif item.in_storage <= threshold:
            low_items.append(_alert_item(item, threshold))

    return StockAnalysis(
        critical_items=critical_items,
        low_items=low_items,
        total_critical=len(critical_items),
        total_low=len(low_items),
    )


def propose_restock(alert_items: Iterable[StockAlertItem], target: Optional[int] = None) -> List[RestockProposal]:
    proposals = []
    for item in alert_items:
        target_stock = target if target is not None else settings.DEFAULT_RESTOCK_TARGET
        needed = max(1, target_stock - item.count)

        if item.count == 0:
            note = f"Restock: out of stock. Procure {needed} unit(s) to reach the target stock ({target_stock} units)."
        else:
            note = (f"Restock: running low ({item.count} left). "
                    f"Procure {needed} unit(s) to reach the target stock ({target_stock} units).")

        proposals.append(RestockProposal(
            key=item.key,
            name=item.name,
            brand=item.brand,
            category=item.category,
            current_stock=item.count,
            target_stock=target_stock,
            quantity=needed,
            note=note,
        ))
    return proposals
