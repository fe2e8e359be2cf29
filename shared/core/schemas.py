from pydantic import BaseModel
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

# Shared properties
T = TypeVar("T")


class Lookup(BaseModel):
    id: Union[str, int]
    name: str

    class Config:
        from_attributes = True


class ExportResponse(BaseModel):
    filename: str
    data: List[Dict[str, Any]]

    class Config:
        from_attributes = True


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str
