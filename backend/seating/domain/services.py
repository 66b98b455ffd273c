from __future__ import annotations

from datetime import datetime
from typing import Iterable

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from ..models import Reservation, generate_reservation_id
from ..utils.time import date_key, to_utc_naive, utc_now
from .errors import DomainValidationFailure, InvalidName, InvalidSeats, NoCapacity

MIN_SEATS = 1
MAX_SEATS = 12


def _validate_name(client_name: str) -> Result[str, InvalidName]:
    if len(client_name) == 0:
        return Failure(InvalidName.create())
    return Success(client_name)


def _validate_seats(seats: int) -> Result[int, InvalidSeats]:
    if seats < MIN_SEATS or seats > MAX_SEATS:
        return Failure(InvalidSeats.create(seats))
    return Success(seats)


def try_create(
    client_name: str,
    seats: int,
    *,
    now: datetime | None = None,
) -> Result[Reservation, DomainValidationFailure]:
    """
    Validate input and build a not-yet-accepted reservation.
    Both checks always run; the first failure (name before seats) is reported.
    """
    checks: list[Result[object, DomainValidationFailure]] = [
        _validate_name(client_name),
        _validate_seats(seats),
    ]
    failures = [check.failure() for check in checks if not is_successful(check)]
    if failures:
        return Failure(failures[0])

    return Success(
        Reservation(
            id=generate_reservation_id(),
            client_name=client_name,
            seats=seats,
            date=to_utc_naive(now) if now is not None else utc_now(),
            accepted=False,
        )
    )


def is_same_day(a: datetime, b: datetime) -> bool:
    return date_key(a) == date_key(b)


def try_accept(
    reservation: Reservation,
    same_day: Iterable[Reservation],
    *,
    capacity: int,
) -> Result[Reservation, NoCapacity]:
    """
    Pure capacity rule: seats already on record for the date plus the candidate's
    seats must not exceed `capacity`. Returns the reservation marked accepted.
    """
    reserved = sum(r.seats for r in same_day)
    if reserved + reservation.seats > capacity:
        return Failure(NoCapacity.create())
    return Success(reservation.accept())
