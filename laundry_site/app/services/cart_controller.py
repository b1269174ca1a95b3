"""
Controller behind the services page.

``CartController`` owns everything the page shows: the cart, the
add/remove button of each service, the booking form fields and the
message board.  Click and submit handlers are plain methods, so the
page's behaviour can be exercised without a browser.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from laundry_site.app.schemas.booking import BookingForm, BookingResult
from laundry_site.app.schemas.cart import CartView
from laundry_site.app.schemas.catalog import ButtonAction, ButtonState
from laundry_site.app.services.booking_service import BookingService
from laundry_site.app.services.cart_renderer import render_cart
from laundry_site.app.services.cart_service import Cart, DuplicateCartItemError
from laundry_site.app.services.catalog_service import ServiceCatalog
from laundry_site.app.services.message_board import MessageBoard

DUPLICATE_ALERT = "This service is already in your cart!"

logger = logging.getLogger(__name__)


class CartController:
    def __init__(self, catalog: ServiceCatalog, messages: Optional[MessageBoard] = None) -> None:
        self.catalog = catalog
        self.cart = Cart()
        self.messages = messages or MessageBoard()
        self.form = BookingForm()
        self.alerts: List[str] = []
        self.buttons: Dict[str, ButtonState] = {
            item.service_id: ButtonState(service_id=item.service_id, name=item.name, price=item.price)
            for item in catalog
        }

    @classmethod
    def from_services_page(cls, path: Path, messages: Optional[MessageBoard] = None) -> "CartController":
        return cls(ServiceCatalog.from_file(path), messages=messages)

    def add_to_cart(self, service_id: str, name: str, price: float) -> bool:
        """Put a service in the cart and flip its button to "Remove Item".

        A duplicate add raises an alert and changes nothing.
        """
        try:
            self.cart.add(service_id, name, price)
        except DuplicateCartItemError:
            logger.info("Duplicate add ignored for %s", service_id)
            self.alerts.append(DUPLICATE_ALERT)
            return False
        self.buttons[service_id] = ButtonState(
            service_id=service_id, action=ButtonAction.REMOVE, name=name, price=price
        )
        return True

    def remove_from_cart(self, service_id: str) -> None:
        removed = self.cart.remove(service_id)
        if removed is None:
            return
        self.buttons[service_id] = ButtonState(
            service_id=service_id, action=ButtonAction.ADD, name=removed.name, price=removed.price
        )

    def click(self, service_id: str) -> None:
        """Run whatever the service's button currently offers."""
        button = self.buttons.get(service_id)
        if button is None:
            raise KeyError(service_id)
        if button.action is ButtonAction.ADD:
            self.add_to_cart(service_id, button.name, button.price)
        else:
            self.remove_from_cart(service_id)

    def view(self) -> CartView:
        return render_cart(self.cart)

    def submit_booking(self, form: Optional[BookingForm] = None) -> BookingResult:
        """Handle a click on the booking button.

        ``form`` replaces the current field values when given.  On
        failure exactly one error message is visible.  On success the
        booking is logged, the success message shown and the form, cart
        and buttons are reset.
        """
        if form is not None:
            self.form = form
        self.messages.hide_all()

        error = BookingService.validate(self.cart, self.form)
        if error is not None:
            self.messages.show(error)
            return BookingResult(error=error)

        submission = BookingService.build_submission(self.cart, self.form)
        BookingService.log_submission(submission)
        self.messages.show_success()

        self.form = BookingForm()
        self.cart.clear()
        self._reset_buttons()
        return BookingResult(submission=submission)

    def _reset_buttons(self) -> None:
        """Put every "Remove Item" button back to "Add Item".

        Catalog services take their name and price from the page again;
        the page re-reads ``data-price`` with ``parseInt``, so those prices
        are whole numbers.  Buttons already offering "Add Item" keep the
        values they were retained with.
        """
        for item in self.catalog:
            current = self.buttons.get(item.service_id)
            if current is None or current.action is ButtonAction.REMOVE:
                self.buttons[item.service_id] = ButtonState(
                    service_id=item.service_id, action=ButtonAction.ADD, name=item.name, price=int(item.price)
                )
        for service_id, button in self.buttons.items():
            if button.action is ButtonAction.REMOVE:
                self.buttons[service_id] = button.model_copy(update={"action": ButtonAction.ADD})
