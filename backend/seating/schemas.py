from datetime import datetime

from pydantic import BaseModel, StrictInt, StrictStr

from .models import Reservation


class ReservationCreate(BaseModel):
    # Range checks belong to the domain; the transport only checks shapes.
    client_name: StrictStr
    seats: StrictInt


class ReservationRead(BaseModel):
    id: str
    client_name: str
    seats: int
    date: datetime
    accepted: bool

    @classmethod
    def from_domain(cls, *, reservation: Reservation) -> "ReservationRead":
        return cls(
            id=reservation.id,
            client_name=reservation.client_name,
            seats=reservation.seats,
            date=reservation.date,
            accepted=reservation.accepted,
        )
