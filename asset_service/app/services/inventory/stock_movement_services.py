# app/services/inventory/stock_movement_services.py
from typing import Iterable, List, Optional

from shared.helpers.date_helper import safe_parse_datetime
from ...enum.asset_enum import AssetStatus, MovementType
from ...schemas.inventory.stock_schemas import StockMovement
from .stock_services import stock_key

RETURNING_STATUSES = {
    AssetStatus.in_use.value,
    AssetStatus.damaged.value,
    AssetStatus.under_repair.value,
}


def infer_movement_type(old_status: str, new_status: str) -> Optional[MovementType]:
    """Stock movement implied by an asset status change, if any."""
    if old_status == new_status:
        return None
    if old_status == AssetStatus.in_storage:
        if new_status == AssetStatus.in_use:
            return MovementType.OUT_INSTALLATION
        if new_status == AssetStatus.damaged:
            return MovementType.OUT_BROKEN
        return None
    if old_status in RETURNING_STATUSES and new_status == AssetStatus.in_storage:
        return MovementType.IN_RETURN
    return None


def _movement_sort_key(movement: StockMovement) -> float:
    parsed = safe_parse_datetime(movement.movement_date)
    return parsed.timestamp() if parsed else 0


def _movements_for(movements: Iterable[StockMovement], name: str, brand: Optional[str]) -> List[StockMovement]:
    key = stock_key(name, brand)
    return [m for m in movements if stock_key(m.asset_name, m.brand) == key]


def recalculate_ledger(movements: Iterable[StockMovement], name: str, brand: Optional[str]) -> List[StockMovement]:
    """
    Oldest-first ledger of one item with a running balance. Outbound
    movements never take the balance below zero.
    """
    ledger = []
    balance = 0.0
    for movement in sorted(_movements_for(movements, name, brand), key=_movement_sort_key):
        quantity = abs(movement.quantity)
        if movement.movement_type.is_inbound:
            balance += quantity
        else:
            balance = max(0.0, balance - quantity)
        ledger.append(movement.model_copy(
            update={"quantity": quantity, "balance_after": balance}))
    return ledger


def get_stock_history(movements: Iterable[StockMovement], name: str, brand: Optional[str]) -> List[StockMovement]:
    return sorted(_movements_for(movements, name, brand), key=_movement_sort_key, reverse=True)
