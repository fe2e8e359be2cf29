# app/services/requests/quantity_reconciler.py
import sys
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Mapping, Optional, Union

from ...enum.asset_enum import ItemApprovalStatus
from ...schemas.requests.request_schemas import (
    ItemApproval, PurchaseRequest, ReconciledItem, RequestItem)

QUANTITY_PLACES = Decimal("0.0001")


class RegistrationQuantityError(ValueError):
    """Raised when a registration batch does not fit the approved remainder."""

    def __init__(self, message: str, remaining: float):
        super().__init__(message)
        self.remaining = remaining


def round4(value: float) -> float:
    # nudge past binary representation error before rounding half-up
    nudged = Decimal(repr(value + sys.float_info.epsilon))
    return float(nudged.quantize(QUANTITY_PLACES, rounding=ROUND_HALF_UP))


def _item_key(item_id: Union[int, str]) -> str:
    return str(item_id)


def reconcile_item(
    item: RequestItem,
    approval: Optional[ItemApproval],
    registered_quantities: Mapping[str, float],
) -> ReconciledItem:
    # no approval record yet counts as approved for the full requested amount
    if approval is not None and approval.approved_quantity is not None:
        approved_quantity = approval.approved_quantity
    else:
        approved_quantity = item.quantity

    registered_quantity = registered_quantities.get(_item_key(item.id)) or 0
    remaining_quantity = max(0.0, round4(approved_quantity - registered_quantity))

    return ReconciledItem(
        item_id=item.id,
        item_name=item.item_name,
        brand=item.brand,
        unit=item.unit,
        approved_quantity=approved_quantity,
        registered_quantity=registered_quantity,
        remaining_quantity=remaining_quantity,
        is_complete=remaining_quantity == 0,
    )


def _approval_for(request: PurchaseRequest, item: RequestItem) -> Optional[ItemApproval]:
    return request.item_statuses.get(_item_key(item.id))


def stage_request_items(request: PurchaseRequest) -> List[ReconciledItem]:
    """Reconcile every line of a request that has not been rejected, in request order."""
    staged = []
    for item in request.items:
        approval = _approval_for(request, item)
        if approval is not None and approval.status == ItemApprovalStatus.rejected:
            continue
        staged.append(reconcile_item(
            item, approval, request.partially_registered_items))
    return staged


def is_request_fully_registered(request: PurchaseRequest) -> bool:
    staged = stage_request_items(request)
    return bool(staged) and all(item.is_complete for item in staged)


def find_request_item(request: PurchaseRequest, item_id: Union[int, str]) -> Optional[RequestItem]:
    key = _item_key(item_id)
    return next((item for item in request.items if _item_key(item.id) == key), None)


def check_registration_quantity(
    item: RequestItem,
    approval: Optional[ItemApproval],
    registered_quantities: Mapping[str, float],
    submitting: float,
) -> ReconciledItem:
    """
    Validate a batch about to be registered against the approved remainder.
    Returns the reconciled line on success, raises RegistrationQuantityError otherwise.
    """
    reconciled = reconcile_item(item, approval, registered_quantities)

    if submitting <= 0:
        raise RegistrationQuantityError(
            "Quantity to register must be greater than zero.",
            reconciled.remaining_quantity)

    if round4(submitting) > reconciled.remaining_quantity:
        raise RegistrationQuantityError(
            f"Quantity exceeds the approved remainder ({reconciled.remaining_quantity:g} {item.unit or 'unit'}).",
            reconciled.remaining_quantity)

    return reconciled


def registered_after(registered_quantities: Mapping[str, float], item_id: Union[int, str], submitting: float) -> Dict[str, float]:
    """New tally map with a registered batch added; the input map is left untouched."""
    key = _item_key(item_id)
    updated = dict(registered_quantities)
    updated[key] = round4((updated.get(key) or 0) + submitting)
    return updated
