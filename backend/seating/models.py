from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime


def generate_reservation_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Reservation:
    id: str
    client_name: str
    seats: int
    date: datetime
    accepted: bool = False

    def accept(self) -> Reservation:
        return replace(self, accepted=True)
