"""
Pydantic models for the booking form.

``BookingForm`` holds the raw field values as typed by the user; no
validation happens at the model level because the form must report
exactly one problem at a time, in a fixed order, which the booking
service handles.  ``BookingSubmission`` is the summary built once all
checks pass.  It is logged and displayed, never persisted.
"""

from typing import Optional

from pydantic import BaseModel, Field


class BookingForm(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""


class BookingSubmission(BaseModel):
    full_name: str
    email: str
    phone: str
    services_list: str = Field(..., description="Comma separated '<name> - ₹<price>' entries")
    total: float


class BookingResult(BaseModel):
    """Outcome of a booking attempt.

    Exactly one of ``error`` and ``submission`` is set.  ``error`` is
    the id of the message element that is now visible.
    """

    error: Optional[str] = None
    submission: Optional[BookingSubmission] = None

    @property
    def ok(self) -> bool:
        return self.submission is not None
