"""
Request/response shapes for the Worker resource.

JSON field names follow the roster's wire format (camelCase, plus the
historical ``RMPaid`` and ``_id`` keys); Python attributes and table columns
are snake_case. Coercion rules:
- permitVisaExpiry: ISO-8601 date or datetime string -> datetime.date
  (a datetime keeps only its calendar date, e.g. JS Date.toISOString())
- RMPaid: any finite number (numeric strings are accepted; other text,
  NaN and Infinity are rejected)
- everything else: free-form text without NUL characters
Unknown keys in a request body are ignored, including ``_id``.
"""
import uuid
from datetime import date, datetime
from typing import Optional
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)

_DATETIME = TypeAdapter(datetime)


class WorkerFields(BaseModel):
    """Editable Worker fields. None of them is required."""
    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
    )

    name: Optional[str] = None
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    status: Optional[str] = None
    passport_number: Optional[str] = Field(default=None, alias="passportNumber")
    permit_visa_expiry: Optional[date] = Field(default=None, alias="permitVisaExpiry")
    rm_paid: Optional[float] = Field(default=None, alias="RMPaid", allow_inf_nan=False)

    @field_validator("permit_visa_expiry", mode="before")
    @classmethod
    def datetime_string_to_date(cls, value):
        """Accept full ISO datetimes; anything else goes to date parsing as-is."""
        if isinstance(value, str) and "T" in value:
            try:
                return _DATETIME.validate_python(value).date()
            except ValidationError:
                return value
        return value

    @field_validator("name", "phone_number", "status", "passport_number")
    @classmethod
    def reject_nul(cls, value: Optional[str]) -> Optional[str]:
        # PostgreSQL text columns cannot store NUL
        if value is not None and "\x00" in value:
            raise ValueError("Text must not contain NUL (0x00) characters")
        return value


class WorkerCreate(WorkerFields):
    """Request for POST /worker and each element of POST /workers."""
    pass


class WorkerUpdate(WorkerFields):
    """
    Request for PUT /worker/{worker_id}.

    Only keys present in the body are applied (model_dump(exclude_unset=True)),
    so an explicit null clears a field while an omitted key leaves it alone.
    """
    pass


class RMPaidUpdate(BaseModel):
    """Request for PUT /worker/{worker_id}/updateRMPaid."""
    model_config = ConfigDict(populate_by_name=True)

    rm_paid: float = Field(alias="RMPaid", allow_inf_nan=False)


class WorkerResponse(WorkerFields):
    """
    Worker record as returned by every endpoint.

    Routes serialize with exclude_none, so fields that were never set are
    left out of the body instead of coming back as null.
    """
    id: uuid.UUID = Field(alias="_id")

    @field_serializer("rm_paid")
    def whole_amount_as_int(self, value: Optional[float]):
        """100.0 goes out as 100, 150.5 stays 150.5."""
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class MessageResponse(BaseModel):
    """Plain message body, used for confirmations and errors."""
    message: str
