# app/router/requests/request_router.py
from fastapi import APIRouter

from shared.helpers.json_response_helper import error_response, success_response
from shared.utils.app_status_code import AppStatusCode
from ...enum.asset_enum import ItemApprovalStatus
from ...schemas.requests.request_schemas import (
    PurchaseRequest, RegistrationCheckRequest, RegistrationCheckResult, StagingResponse)
from ...services.requests import quantity_reconciler as reconciler

router = APIRouter(
    prefix="/api/requests",
    tags=["requests"],
)


@router.post("/staging", response_model=StagingResponse)
def staging_items(request: PurchaseRequest):
    items = reconciler.stage_request_items(request)
    return StagingResponse(
        request_id=request.id,
        items=items,
        is_fully_registered=reconciler.is_request_fully_registered(request),
    )


@router.post("/registration-check", response_model=None)
def registration_check(params: RegistrationCheckRequest):
    request = params.request
    item = reconciler.find_request_item(request, params.item_id)
    if item is None:
        return error_response(
            message=f"Request item {params.item_id} not found in {request.doc_number or request.id}",
            status_code=AppStatusCode.REQUEST_ITEM_NOT_FOUND,
            http_status=404
        )

    approval = request.item_statuses.get(str(item.id))
    if approval is not None and approval.status == ItemApprovalStatus.rejected:
        return error_response(
            message=f"Request item {params.item_id} was rejected",
            status_code=AppStatusCode.REQUEST_ITEM_REJECTED,
            http_status=400
        )

    try:
        reconciled = reconciler.check_registration_quantity(
            item, approval, request.partially_registered_items, params.quantity)
    except reconciler.RegistrationQuantityError as e:
        code = AppStatusCode.QUANTITY_NOT_POSITIVE if params.quantity <= 0 else AppStatusCode.QUANTITY_EXCEEDS_REMAINING
        return error_response(message=str(e), status_code=code, http_status=400)

    registered = reconciler.registered_after(
        request.partially_registered_items, item.id, params.quantity)
    after = reconciler.reconcile_item(item, approval, registered)

    return success_response(
        data=RegistrationCheckResult(
            item=reconciled,
            submitted_quantity=params.quantity,
            remaining_after=after.remaining_quantity,
        ),
        message="Quantity fits the approved remainder",
        status_code=AppStatusCode.OPERATION_SUCCESSFUL
    )
