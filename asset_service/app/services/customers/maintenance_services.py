# app/services/customers/maintenance_services.py
from typing import Iterable

from ...schemas.customers.customer_activity_schemas import (
    Maintenance, MaintenanceDetail, MaterialDetail, ReplacementDetail)
from ...schemas.inventory.assets_schemas import Asset
from ..inventory.assets_services import find_asset_reference
from .activity_timeline import maintenance_title


def build_maintenance_detail(maintenance: Maintenance, assets: Iterable[Asset]) -> MaintenanceDetail:
    """Resolve the asset ids a maintenance record points at.

    Ids that no longer match an asset come back as "not found" references.
    """
    assets = list(assets)

    replacements = [
        ReplacementDetail(
            old_asset=find_asset_reference(rep.old_asset_id, assets),
            new_asset=find_asset_reference(rep.new_asset_id, assets),
            retrieved_asset_condition=rep.retrieved_asset_condition,
        )
        for rep in maintenance.replacements or []
    ]

    materials = [
        MaterialDetail(
            asset=find_asset_reference(
                material.material_asset_id, assets) if material.material_asset_id else None,
            item_name=material.item_name,
            brand=material.brand,
            quantity=material.quantity,
            unit=material.unit,
        )
        for material in maintenance.materials_used or []
    ]

    return MaintenanceDetail(
        id=maintenance.id,
        doc_number=maintenance.doc_number,
        title=maintenance_title(maintenance),
        replacements=replacements,
        materials=materials,
    )
