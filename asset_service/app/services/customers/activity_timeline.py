# app/services/customers/activity_timeline.py
from datetime import datetime
from typing import Iterable, List, Optional

from shared.helpers.date_helper import parse_datetime_or_now, utc_now
from ...enum.asset_enum import ActivityType
from ...schemas.customers.customer_activity_schemas import (
    CustomerActivity, Dismantle, Installation, Maintenance, NavigationTarget)

DEVICE_REPLACEMENT = "Device Replacement"
MATERIAL_ADDITION = "Material Addition"
ROUTINE_REPAIR = "Routine Repair"


def maintenance_title(maintenance: Maintenance) -> str:
    if maintenance.replacements:
        return DEVICE_REPLACEMENT
    if maintenance.materials_used:
        return MATERIAL_ADDITION
    return ROUTINE_REPAIR


def _installation_activity(inst: Installation, now: datetime) -> CustomerActivity:
    activity_date, recovered = parse_datetime_or_now(
        inst.installation_date, now, f"installation {inst.id}")
    return CustomerActivity(
        activity_date=activity_date,
        activity_type=ActivityType.installation,
        title=f"Installation: {inst.doc_number or inst.id}",
        doc_number=inst.doc_number,
        details={"technician": inst.technician},
        target=NavigationTarget(page="customer-installation-form", id=inst.id),
        date_recovered=recovered,
    )


def _maintenance_activity(m: Maintenance, now: datetime) -> CustomerActivity:
    activity_date, recovered = parse_datetime_or_now(
        m.maintenance_date, now, f"maintenance {m.id}")
    return CustomerActivity(
        activity_date=activity_date,
        activity_type=ActivityType.maintenance,
        title=maintenance_title(m),
        doc_number=m.doc_number,
        details={
            "technician": m.technician,
            "problem_description": m.problem_description,
        },
        target=NavigationTarget(page="customer-maintenance-form", id=m.id),
        date_recovered=recovered,
    )


def _dismantle_activity(d: Dismantle, now: datetime) -> CustomerActivity:
    activity_date, recovered = parse_datetime_or_now(
        d.dismantle_date, now, f"dismantle {d.id}")
    return CustomerActivity(
        activity_date=activity_date,
        activity_type=ActivityType.dismantle,
        title=f"Dismantle: {d.asset_name or d.asset_id or d.id}",
        doc_number=d.doc_number,
        details={"technician": d.technician, "asset_id": d.asset_id},
        target=NavigationTarget(page="customer-dismantle", id=d.id),
        date_recovered=recovered,
    )


def build_customer_timeline(
    customer_id: str,
    installations: Iterable[Installation],
    maintenances: Iterable[Maintenance],
    dismantles: Iterable[Dismantle],
    now: Optional[datetime] = None,
) -> List[CustomerActivity]:
    """
    Merge the installations, maintenances and dismantles of one customer into
    a single feed, newest first. Records with unreadable dates are placed at
    ``now`` instead of failing the whole feed.
    """
    now = now or utc_now()

    activities = [
        _installation_activity(i, now) for i in installations if i.customer_id == customer_id
    ]
    activities += [
        _maintenance_activity(m, now) for m in maintenances if m.customer_id == customer_id
    ]
    activities += [
        _dismantle_activity(d, now) for d in dismantles if d.customer_id == customer_id
    ]

    return sorted(activities, key=lambda a: a.activity_date, reverse=True)
