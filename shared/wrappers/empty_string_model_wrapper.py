import re
from uuid import UUID
from pydantic import BaseModel, model_validator
from typing import Any

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def deep_clean(value: Any):
    """Recursively convert empty strings to None, clean invisible chars, and handle nested models."""

    # 1️⃣ Handle Pydantic models
    if isinstance(value, BaseModel):
        return value

    # 2️⃣ Handle dictionaries
    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    # 3️⃣ Handle lists
    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    # 4️⃣ Handle strings (scanner input often carries direction marks)
    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    # 5️⃣ UUIDs pass through untouched
    if isinstance(value, UUID):
        return value

    return value


class EmptyStringModel(BaseModel):
    """Base for snapshots coming from the front-end stores.

    Empty strings are treated as missing values, so optional fields fall
    back to their defaults instead of failing validation.
    """
    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            cleaned = deep_clean(values)
            # drop keys that became None so field defaults apply
            return {k: v for k, v in cleaned.items() if v is not None}
        return values
