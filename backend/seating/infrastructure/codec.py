from __future__ import annotations

import base64
import binascii
from datetime import datetime
from typing import Any, Dict

import msgpack
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NaiveDatetime,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)
from returns.result import Failure, Result, Success

from ..domain.errors import ParsingFailure
from ..domain.services import MAX_SEATS, MIN_SEATS
from ..models import Reservation


class ReservationRecord(BaseModel):
    """Persisted shape of a reservation line; validated on every read."""

    model_config = ConfigDict(extra="forbid")

    id: StrictStr = Field(min_length=1)
    client_name: StrictStr = Field(min_length=1)
    seats: StrictInt = Field(ge=MIN_SEATS, le=MAX_SEATS)
    date: NaiveDatetime
    accepted: StrictBool

    @field_validator("date", mode="before")
    @classmethod
    def _date_is_iso_text(cls, value: Any) -> Any:
        # Stored dates are naive UTC ISO-8601 strings; epoch numbers are rejected.
        if not isinstance(value, (str, datetime)):
            raise ValueError("date must be an ISO-8601 string")
        return value

    @classmethod
    def from_domain(cls, reservation: Reservation) -> "ReservationRecord":
        return cls(
            id=reservation.id,
            client_name=reservation.client_name,
            seats=reservation.seats,
            date=reservation.date,
            accepted=reservation.accepted,
        )

    def to_domain(self) -> Reservation:
        return Reservation(
            id=self.id,
            client_name=self.client_name,
            seats=self.seats,
            date=self.date,
            accepted=self.accepted,
        )


class ReservationCodec:
    """
    One reservation <-> one printable line.

    Line format: base64(msgpack(document)), where document is the
    ReservationRecord dict with `date` rendered as ISO-8601.
    """

    @staticmethod
    def to_document(reservation: Reservation) -> Dict[str, Any]:
        return ReservationRecord.from_domain(reservation).model_dump(mode="json")

    @staticmethod
    def encode(reservation: Reservation) -> str:
        packed = msgpack.packb(ReservationCodec.to_document(reservation))
        return base64.b64encode(packed).decode("ascii")

    @staticmethod
    def decode(line: str) -> Result[Reservation, ParsingFailure]:
        try:
            packed = base64.b64decode(line.strip(), validate=True)
            document = msgpack.unpackb(packed, raw=False)
            record = ReservationRecord.model_validate(document)
        except (binascii.Error, ValueError, ValidationError, msgpack.UnpackException) as exc:
            return Failure(ParsingFailure.create(exc))
        return Success(record.to_domain())
