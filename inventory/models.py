# inventory/models.py
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    id: str
    name: str = Field(min_length=1)
    quantity: float = Field(gt=0)
    price: float = Field(gt=0)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1)


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    quantity: float = Field(gt=0)
    price: float = Field(gt=0)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1)


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    quantity: Optional[float] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, gt=0)
    description: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied; explicit nulls are dropped."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class SortField(str, Enum):
    PRICE = "price"
    QUANTITY = "quantity"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ProductQuery(BaseModel):
    # page and limit stay raw: bad values fall back to defaults instead of a 422
    search: Optional[str] = None
    page: Optional[Any] = None
    limit: Optional[Any] = None
    sort_by: Optional[SortField] = None
    order: Optional[SortOrder] = None


# ---------------------------
# Response envelopes
# ---------------------------
class ProductEnvelope(BaseModel):
    data: Product


class ProductListEnvelope(BaseModel):
    data: List[Product]
    page: int
    limit: int
    total: int


class Message(BaseModel):
    message: str


class MessageEnvelope(BaseModel):
    data: Message
