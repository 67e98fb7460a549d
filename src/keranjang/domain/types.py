"""Domain types for Keranjang."""
from enum import Enum
from typing import NewType, Optional, Literal, Annotated
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Strong types for IDs
OwnerGroupId = NewType('OwnerGroupId', str)
ListId = NewType('ListId', str)
ItemId = NewType('ItemId', str)

Locale = Literal["id", "en"]

PositiveAmount = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class Collection(str, Enum):
    """Keys of the four collections kept in the persistence store."""
    LISTS = "lists"
    ITEMS = "items"
    HISTORY = "history"
    STORES = "stores"


class ListRecord(BaseModel):
    """A named shopping list owned by one group."""
    id: str
    name: str
    owner_group_id: str
    created_by: str = "guest"
    created_at: datetime


class NewItem(BaseModel):
    """Payload for adding an item to a list."""
    owner_group_id: str
    list_id: str
    name: Annotated[str, Field(min_length=1)]
    quantity: PositiveAmount = 1
    unit: Annotated[str, Field(min_length=1, max_length=20)] = "pcs"
    notes: Optional[str] = None
    category: Optional[str] = None

    @field_validator('name')
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        """Reject names that are only whitespace."""
        if not v.strip():
            raise ValueError('Item name cannot be empty')
        return v.strip()


class ItemRecord(BaseModel):
    """An active shopping entry."""
    id: str
    list_id: str
    name: str
    quantity: PositiveAmount
    unit: str
    is_purchased: bool = False
    owner_group_id: str
    created_at: datetime
    notes: Optional[str] = None
    # Filled in at checkout
    price: Optional[float] = None
    category: Optional[str] = None
    store_name: Optional[str] = None


class HistoryRecord(BaseModel):
    """Immutable purchase receipt."""
    id: str
    owner_group_id: str
    item_name: str
    final_price: Annotated[float, Field(ge=0, allow_inf_nan=False)]
    total_size: PositiveAmount
    base_unit: str
    category: Optional[str] = None
    list_name: Optional[str] = None
    store_name: Optional[str] = None
    notes: Optional[str] = None
    purchased_at: datetime

    model_config = ConfigDict(frozen=True)

    @property
    def unit_price(self) -> float:
        """Price per base unit."""
        return self.final_price / self.total_size


class StoreRecord(BaseModel):
    """A shop name used for autocomplete."""
    name: Annotated[str, Field(min_length=1)]


class ParsedItem(BaseModel):
    """Structured result of parsing a typed or spoken command."""
    raw: str
    name: str
    quantity: PositiveAmount = 1
    unit: str = "pcs"


class CheckoutReceipt(BaseModel):
    """Outcome of a completed checkout."""
    history: HistoryRecord
    item: Optional[ItemRecord] = None
