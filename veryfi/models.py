"""
Veryfi SDK request models.

Line item payloads sent to /documents/{id}/line-items/. Responses are
returned as raw JSON text and are not modelled here.
"""

from dataclasses import dataclass, fields

from veryfi.errors import ValidationError


@dataclass(kw_only=True)
class SharedLineItem:
    """Optional fields common to added and updated line items."""

    sku: str | None = None
    category: str | None = None
    tax: float | None = None
    price: float | None = None
    unit_of_measure: str | None = None
    quantity: float | None = None
    upc: str | None = None
    tax_rate: float | None = None
    discount_rate: float | None = None
    start_date: str | None = None
    end_date: str | None = None
    hsn: str | None = None
    section: str | None = None
    weight: str | None = None

    def _present_fields(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class AddLineItem(SharedLineItem):
    """A new line item. order, description and total are required."""

    order: int
    description: str
    total: float

    def to_dict(self) -> dict:
        if self.order is None or self.description is None or self.total is None:
            raise ValidationError("order, description and total can't be None")
        return self._present_fields()


@dataclass(kw_only=True)
class UpdateLineItem(SharedLineItem):
    """Partial update of an existing line item. At least one field must be set."""

    order: int | None = None
    description: str | None = None
    total: float | None = None

    def to_dict(self) -> dict:
        payload = self._present_fields()
        if not payload:
            raise ValidationError("All fields are None")
        return payload
