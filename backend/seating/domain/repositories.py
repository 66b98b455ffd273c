from __future__ import annotations

from typing import Callable, Protocol

from returns.maybe import Maybe
from returns.result import Result

from ..models import Reservation
from .errors import DbFailure

ReservationPredicate = Callable[[Reservation], bool]


class ReservationRepository(Protocol):
    """
    Access boundary to the append-only log of reservations.
    Results come back in storage (insertion) order; the only mutation is append.
    """

    async def find_when(self, predicate: ReservationPredicate) -> Result[list[Reservation], DbFailure]: ...

    async def find_one_when(self, predicate: ReservationPredicate) -> Result[Maybe[Reservation], DbFailure]: ...

    async def save_reservation(self, reservation: Reservation) -> Result[None, DbFailure]: ...
