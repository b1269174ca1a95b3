"""Projection of a cart onto the rows of the cart table."""

from laundry_site.app.schemas.cart import CartRow, CartView
from laundry_site.app.services.cart_service import Cart

CURRENCY = "₹"


def format_price(price: float) -> str:
    return f"{CURRENCY}{price:.2f}"


def format_total(total: float) -> str:
    return f"{CURRENCY} {total:.2f}"


def render_cart(cart: Cart) -> CartView:
    """Build the table rows and total label for ``cart``.

    Rows are numbered from 1 in insertion order.  An empty cart has no
    rows and is shown with the placeholder message instead.
    """
    rows = [
        CartRow(index=index, service_id=service_id, name=item.name, price_label=format_price(item.price))
        for index, (service_id, item) in enumerate(cart.items(), start=1)
    ]
    total = cart.total()
    return CartView(rows=rows, is_empty=not rows, total=total, total_label=format_total(total))
