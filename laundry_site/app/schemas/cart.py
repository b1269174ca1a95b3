"""
Pydantic models for the shopping cart and its rendered table.

``CartItem`` is what the cart stores per service.  ``CartView`` is the
renderable projection of a cart: the rows of the ``cart-body`` table
and the text of the ``total-amount`` cell.
"""

from typing import List

from pydantic import BaseModel, Field


class CartItem(BaseModel):
    name: str
    price: float = Field(..., ge=0)


class CartRow(BaseModel):
    """One line of the cart table."""

    index: int = Field(..., ge=1, description="1-based position in the table")
    service_id: str
    name: str
    price_label: str


class CartView(BaseModel):
    """Cart state projected for display.

    When the cart is empty ``rows`` is empty and ``empty_message`` holds
    the placeholder text shown across the whole table.
    """

    rows: List[CartRow] = Field(default_factory=list)
    is_empty: bool = True
    empty_message: str = "No items added"
    total: float = 0.0
    total_label: str = "₹ 0.00"
