# app/schemas/requests/request_schemas.py
from pydantic import BaseModel
from typing import Dict, List, Optional, Union

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.asset_enum import ItemApprovalStatus


class RequestItem(EmptyStringModel):
    id: Union[int, str]
    item_name: str
    brand: Optional[str] = None
    quantity: float
    unit: Optional[str] = None
    category_id: Optional[Union[int, str]] = None
    type_id: Optional[Union[int, str]] = None
    notes: Optional[str] = None


class ItemApproval(EmptyStringModel):
    approved_quantity: Optional[float] = None
    status: ItemApprovalStatus = ItemApprovalStatus.pending
    reason: Optional[str] = None


class PurchaseRequest(EmptyStringModel):
    id: str
    doc_number: Optional[str] = None
    items: List[RequestItem] = []
    item_statuses: Dict[str, ItemApproval] = {}
    partially_registered_items: Dict[str, float] = {}


class ReconciledItem(BaseModel):
    item_id: Union[int, str]
    item_name: Optional[str] = None
    brand: Optional[str] = None
    unit: Optional[str] = None
    approved_quantity: float
    registered_quantity: float
    remaining_quantity: float
    is_complete: bool


class StagingResponse(BaseModel):
    request_id: str
    items: List[ReconciledItem]
    is_fully_registered: bool


class RegistrationCheckRequest(EmptyStringModel):
    request: PurchaseRequest
    item_id: Union[int, str]
    quantity: float


class RegistrationCheckResult(BaseModel):
    item: ReconciledItem
    submitted_quantity: float
    remaining_after: float
