# app/services/inventory/depreciation_services.py
from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

from shared.core.config import settings
from ...schemas.inventory.assets_schemas import Asset, DepreciationResult


def _as_date(value) -> date:
    return value.date() if isinstance(value, datetime) else value


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end, never negative."""
    delta = relativedelta(_as_date(end), _as_date(start))
    return max(0, delta.years * 12 + delta.months)


def calculate_depreciation(
    asset: Asset,
    useful_life_years: Optional[int] = None,
    as_of: Optional[date] = None,
) -> Optional[DepreciationResult]:
    """
    Straight-line book value of an asset.

    Returns None when the purchase price or purchase date is missing,
    since there is nothing to depreciate from.
    """
    if asset.purchase_price is None or asset.purchase_date is None:
        return None

    years = settings.USEFUL_LIFE_YEARS if useful_life_years is None else useful_life_years
    if years <= 0:
        raise ValueError("useful_life_years must be positive")
    useful_months = years * 12
    months_passed = months_between(asset.purchase_date, as_of or date.today())

    # monthly figure is display only; book value uses the unrounded rate
    monthly_depreciation = round(asset.purchase_price / useful_months, 2)
    remaining_months = max(0, useful_months - months_passed)
    current_value = max(0.0, round(
        asset.purchase_price * remaining_months / useful_months, 2))

    return DepreciationResult(
        asset_id=asset.id,
        initial_value=asset.purchase_price,
        useful_life_years=years,
        months_passed=months_passed,
        monthly_depreciation=monthly_depreciation,
        current_value=current_value,
        is_fully_depreciated=months_passed >= useful_months,
    )
