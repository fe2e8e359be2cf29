from enum import Enum


class AssetStatus(str, Enum):

    in_storage = "in_storage"
    in_use = "in_use"
    damaged = "damaged"
    under_repair = "under_repair"
    out_for_repair = "out_for_repair"


class AssetCondition(str, Enum):

    brand_new = "brand_new"
    good = "good"
    used_okay = "used_okay"
    minor_damage = "minor_damage"
    major_damage = "major_damage"
    for_parts = "for_parts"


class TrackingMethod(str, Enum):

    individual = "individual"
    bulk = "bulk"


class ItemApprovalStatus(str, Enum):

    approved = "approved"
    rejected = "rejected"
    pending = "pending"


class ActivityType(str, Enum):

    installation = "installation"
    maintenance = "maintenance"
    dismantle = "dismantle"


class MovementType(str, Enum):

    IN_PURCHASE = "IN_PURCHASE"
    IN_RETURN = "IN_RETURN"
    IN_DISMANTLE = "IN_DISMANTLE"
    OUT_INSTALLATION = "OUT_INSTALLATION"
    OUT_BROKEN = "OUT_BROKEN"
    OUT_ADJUSTMENT = "OUT_ADJUSTMENT"
    OUT_HANDOVER = "OUT_HANDOVER"

    @property
    def is_inbound(self) -> bool:
        return self.value.startswith("IN_")


class SortDirection(str, Enum):

    ascending = "ascending"
    descending = "descending"
