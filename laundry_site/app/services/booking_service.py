"""
Validation and summary of the booking form.

Checks run in a fixed order and stop at the first failure, so the user
only ever sees one error at a time.  The cart is checked before any
field is looked at.  Each check reports the id of the message element
that explains the problem.
"""

import logging
import re
from typing import Optional

from laundry_site.app.schemas.booking import BookingForm, BookingSubmission
from laundry_site.app.services.cart_renderer import CURRENCY, format_price
from laundry_site.app.services.cart_service import Cart

ERROR_EMPTY_CART = "error-msg"
ERROR_NAME = "error-name"
ERROR_EMAIL = "error-email"
ERROR_EMAIL_INVALID = "error-email-invalid"
ERROR_PHONE = "error-phone"

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def _plain_number(value: float) -> str:
    # Whole prices print without decimals ("150"), others as-is ("99.5").
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class BookingService:
    """Validate, summarise and record bookings made from the services page."""

    @classmethod
    def validate(cls, cart: Cart, form: BookingForm) -> Optional[str]:
        """Return the id of the first failing check, or ``None`` if all pass."""
        if cart.is_empty:
            return ERROR_EMPTY_CART

        full_name = form.full_name.strip()
        email = form.email.strip()
        phone = form.phone.strip()

        if not full_name:
            return ERROR_NAME
        if not email:
            return ERROR_EMAIL
        if not is_valid_email(email):
            return ERROR_EMAIL_INVALID
        if not phone:
            return ERROR_PHONE
        return None

    @classmethod
    def build_submission(cls, cart: Cart, form: BookingForm) -> BookingSubmission:
        """Summarise a validated booking.

        ``services_list`` reads like ``"Wash & Fold - ₹150, Ironing - ₹80"``.
        """
        services_list = ", ".join(
            f"{item.name} - {CURRENCY}{_plain_number(item.price)}" for _, item in cart.items()
        )
        return BookingSubmission(
            full_name=form.full_name.strip(),
            email=form.email.strip(),
            phone=form.phone.strip(),
            services_list=services_list,
            total=cart.total(),
        )

    @classmethod
    def log_submission(cls, submission: BookingSubmission) -> None:
        """Record the booking.  Bookings are not stored anywhere else."""
        logger = logging.getLogger(__name__)
        logger.info(
            "Booking details: name=%s email=%s phone=%s services=[%s] total=%s",
            submission.full_name,
            submission.email,
            submission.phone,
            submission.services_list,
            format_price(submission.total),
        )
