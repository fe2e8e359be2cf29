# app/services/customers/document_number_services.py
from datetime import date
from typing import Iterable, Optional

MAINTENANCE_PREFIX = "MNT"
INSTALLATION_PREFIXES = ("WO-IKR", "INST")


def _next_sequence(day_prefix: str, existing_doc_numbers: Iterable[Optional[str]]) -> int:
    highest = 0
    for doc_number in existing_doc_numbers:
        if not doc_number or not doc_number.startswith(day_prefix):
            continue
        suffix = doc_number.split("-")[-1]
        if suffix.isdigit():
            highest = max(highest, int(suffix))
    return highest + 1


def generate_document_number(prefix: str, existing_doc_numbers: Iterable[Optional[str]], doc_date: Optional[date] = None) -> str:
    """
    Next free document number for the given day.

    Formats:
        MNT            -> WO-MT-YYYYMMDD-NNNN
        WO-IKR / INST  -> WO-IKR-DDMMYY-NNNN
        anything else  -> PREFIX-YYMMDD-NNN
    """
    d = doc_date or date.today()
    existing_doc_numbers = list(existing_doc_numbers)

    if prefix == MAINTENANCE_PREFIX:
        day_prefix = f"WO-MT-{d:%Y%m%d}"
        return f"{day_prefix}-{_next_sequence(day_prefix, existing_doc_numbers):04d}"

    if prefix in INSTALLATION_PREFIXES:
        day_prefix = f"WO-IKR-{d:%d%m%y}"
        return f"{day_prefix}-{_next_sequence(day_prefix, existing_doc_numbers):04d}"

    day_prefix = f"{prefix}-{d:%y%m%d}"
    return f"{day_prefix}-{_next_sequence(day_prefix, existing_doc_numbers):03d}"
