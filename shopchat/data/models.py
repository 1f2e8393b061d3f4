"""
Pydantic models for catalog rows returned by the store.
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

# Any row of any table, as returned by the store
GenericRecord = Dict[str, Any]


class NamedRef(BaseModel):
    """Joined sub-record that only carries a display name (brand, collection)."""
    name: Optional[str] = Field(default=None, description="Display name")


class Variant(BaseModel):
    """A sellable size/color combination of a product."""
    size: Optional[str] = Field(default=None, description="Size label")
    color: Optional[str] = Field(default=None, description="Color label")
    sales_price: Decimal = Field(default=Decimal("0"), ge=0, description="Sales price in the store currency")
    stock: int = Field(default=0, ge=0, description="Units on hand")

    @field_validator("size", "color", mode="before")
    @classmethod
    def _label_to_str(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @field_validator("sales_price", "stock", mode="before")
    @classmethod
    def _null_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class Product(BaseModel):
    """Product with brand, collection and variants joined in."""
    id: Optional[Any] = Field(default=None, description="Primary key")
    name: str = Field(description="Product name")
    brand: Optional[NamedRef] = Field(default=None, description="Joined brand, if any")
    collection: Optional[NamedRef] = Field(default=None, description="Joined collection, if any")
    variants: List[Variant] = Field(default_factory=list, description="Variants owned by this product")

    @field_validator("variants", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def full_name(self) -> str:
        """'<brand> <name> (<collection>)' with missing parts left blank."""
        brand = self.brand.name if self.brand and self.brand.name else ""
        collection = self.collection.name if self.collection and self.collection.name else ""
        return f"{brand} {self.name} ({collection})".strip()
