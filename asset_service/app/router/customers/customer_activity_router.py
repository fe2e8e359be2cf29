# app/router/customers/customer_activity_router.py
from typing import List
from fastapi import APIRouter

from ...schemas.customers.customer_activity_schemas import (
    CustomerActivity, CustomerActivityRequest, DocumentNumberOut, DocumentNumberRequest,
    MaintenanceDetail, MaintenanceDetailRequest)
from ...services.customers import activity_timeline, maintenance_services, document_number_services

router = APIRouter(
    prefix="/api",
    tags=["customers"],
)


@router.post("/customers/{customer_id}/activities", response_model=List[CustomerActivity])
def customer_activities(customer_id: str, params: CustomerActivityRequest):
    return activity_timeline.build_customer_timeline(
        customer_id, params.installations, params.maintenances, params.dismantles)


@router.post("/customers/maintenance-detail", response_model=MaintenanceDetail)
def maintenance_detail(params: MaintenanceDetailRequest):
    return maintenance_services.build_maintenance_detail(params.maintenance, params.assets)


@router.post("/documents/next-number", response_model=DocumentNumberOut)
def next_document_number(params: DocumentNumberRequest):
    doc_number = document_number_services.generate_document_number(
        params.prefix, params.existing_doc_numbers, params.doc_date)
    return DocumentNumberOut(doc_number=doc_number)
