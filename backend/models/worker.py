import uuid
from datetime import date, datetime, timezone
from typing import Optional
from sqlalchemy import Date, DateTime, Float, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from models import Base


class Worker(Base):
    """
    Model for migrant-labor roster entries.

    One row per laborer. Only the identity key is mandatory:
    - id: UUID assigned on insert, never reassigned
    - identity/contact: name, phone_number, passport_number
    - immigration: permit_visa_expiry (calendar date)
    - payment: rm_paid (amount paid, in RM)
    """
    __tablename__ = "workers"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4
    )

    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    passport_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    permit_visa_expiry: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    rm_paid: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self) -> str:
        return f"<Worker(id={self.id}, name='{self.name}', status='{self.status}')>"
