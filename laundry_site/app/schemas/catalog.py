"""
Pydantic models for the bookable laundry services.

A ``ServiceItem`` mirrors one ``.service-item`` container on the
services page: its ``data-service`` id, the ``.service-name`` label and
the ``data-price`` attribute.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ServiceItem(BaseModel):
    service_id: str = Field(..., min_length=1)
    name: str
    price: float = Field(..., ge=0)


class ButtonAction(str, Enum):
    ADD = "add"
    REMOVE = "remove"


class ButtonState(BaseModel):
    """State of a service's action button.

    ``name`` and ``price`` are what the next "add" click will put into
    the cart.  After a removal they are the values of the removed
    entry; after a booking reset they come from the catalog.
    """

    service_id: str
    action: ButtonAction = ButtonAction.ADD
    name: str
    price: float

    @property
    def label(self) -> str:
        return "Add Item" if self.action is ButtonAction.ADD else "Remove Item"

    @property
    def css_class(self) -> str:
        suffix = "add-btn" if self.action is ButtonAction.ADD else "remove-btn"
        return f"service-btn {suffix}"
