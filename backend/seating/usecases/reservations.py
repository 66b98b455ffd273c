from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable, List
from weakref import WeakKeyDictionary

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from ..domain.errors import AcceptReservationFailure, DbFailure, NotFound, ReservationLookupFailure
from ..domain.repositories import ReservationRepository
from ..domain.services import is_same_day, try_accept, try_create
from ..models import Reservation
from ..utils.time import utc_now

logger = logging.getLogger(__name__)

_capacity_locks: "WeakKeyDictionary[ReservationRepository, asyncio.Lock]" = WeakKeyDictionary()


def capacity_lock(repo: ReservationRepository) -> asyncio.Lock:
    """Single-writer lock guarding read-check-write on one repository."""
    lock = _capacity_locks.get(repo)
    if lock is None:
        lock = asyncio.Lock()
        _capacity_locks[repo] = lock
    return lock


async def try_accept_reservation(
    repo: ReservationRepository,
    *,
    total_capacity: int,
    client_name: str,
    seats: int,
    clock: Callable[[], datetime] = utc_now,
) -> Result[Reservation, AcceptReservationFailure]:
    created = try_create(client_name, seats, now=clock())
    if not is_successful(created):
        return created
    candidate = created.unwrap()

    # Read, capacity check and append must not interleave with another request.
    async with capacity_lock(repo):
        same_day = await repo.find_when(lambda r: is_same_day(r.date, candidate.date))
        if not is_successful(same_day):
            return same_day

        accepted = try_accept(candidate, same_day.unwrap(), capacity=total_capacity)
        if not is_successful(accepted):
            return accepted
        reservation = accepted.unwrap()

        saved = await repo.save_reservation(reservation)
        if not is_successful(saved):
            return saved

    logger.info("accepted reservation %s: %d seats on %s", reservation.id, reservation.seats, reservation.date.date())
    return Success(reservation)


async def get_reservation_by_id(
    repo: ReservationRepository,
    *,
    reservation_id: str,
) -> Result[Reservation, ReservationLookupFailure]:
    found = await repo.find_one_when(lambda r: r.id == reservation_id)
    if not is_successful(found):
        return found
    reservation = found.unwrap().value_or(None)
    if reservation is None:
        return Failure(NotFound.create(reservation_id))
    return Success(reservation)


async def get_last_client_reservations(
    repo: ReservationRepository,
    *,
    client_name: str,
    count: int,
) -> Result[List[Reservation], DbFailure]:
    """Most recently appended `count` reservations of a client, oldest first."""
    matches = await repo.find_when(lambda r: r.client_name == client_name)
    return matches.map(lambda rs: rs[-count:] if count > 0 else [])
