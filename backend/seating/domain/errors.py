from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TypeAlias


class FailureCode(StrEnum):
    INVALID_NAME = "INVALID_NAME"
    INVALID_SEATS = "INVALID_SEATS"
    NO_CAPACITY = "NO_CAPACITY"
    NOT_FOUND = "NOT_FOUND"
    DB_FAILURE = "DB_FAILURE"
    PARSING = "PARSING"
    VALIDATION = "VALIDATION"


@dataclass(frozen=True, slots=True)
class AppFailure:
    """
    Failure value returned inside a Result. Never raised.
    Each subclass pins its own `code`.
    """

    code: ClassVar[FailureCode]
    message: str
    cause: BaseException | None = None

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True, slots=True)
class InvalidName(AppFailure):
    code: ClassVar[FailureCode] = FailureCode.INVALID_NAME

    @classmethod
    def create(cls) -> InvalidName:
        return cls("Invalid empty name")


@dataclass(frozen=True, slots=True)
class InvalidSeats(AppFailure):
    code: ClassVar[FailureCode] = FailureCode.INVALID_SEATS

    @classmethod
    def create(cls, seats: int) -> InvalidSeats:
        return cls(f"You are only allowed to reserve from 1 to 12 seats. You provided {seats}")


@dataclass(frozen=True, slots=True)
class NoCapacity(AppFailure):
    code: ClassVar[FailureCode] = FailureCode.NO_CAPACITY

    @classmethod
    def create(cls) -> NoCapacity:
        return cls("There is no capacity")


@dataclass(frozen=True, slots=True)
class NotFound(AppFailure):
    code: ClassVar[FailureCode] = FailureCode.NOT_FOUND

    @classmethod
    def create(cls, reservation_id: str) -> NotFound:
        return cls(f"Reservation with id: {reservation_id} was not found")


@dataclass(frozen=True, slots=True)
class ParsingFailure(AppFailure):
    code: ClassVar[FailureCode] = FailureCode.PARSING

    @classmethod
    def create(cls, exc: BaseException) -> ParsingFailure:
        return cls(f"Error at parsing: {exc}", exc)


@dataclass(frozen=True, slots=True)
class ValidationFailure(AppFailure):
    code: ClassVar[FailureCode] = FailureCode.VALIDATION

    @classmethod
    def create(cls, exc: BaseException) -> ValidationFailure:
        return cls(f"Error validating: {exc}", exc)


@dataclass(frozen=True, slots=True)
class DbFailure(AppFailure):
    code: ClassVar[FailureCode] = FailureCode.DB_FAILURE

    @classmethod
    def create(cls, exc: BaseException) -> DbFailure:
        return cls(f"Database Error: {exc}", exc)

    @classmethod
    def from_failure(cls, failure: AppFailure) -> DbFailure:
        """Fold a lower-level failure (e.g. PARSING) into DB_FAILURE, keeping its cause."""
        return cls(f"Database Error: {failure}", failure.cause)


DomainValidationFailure: TypeAlias = InvalidName | InvalidSeats
AcceptReservationFailure: TypeAlias = InvalidName | InvalidSeats | NoCapacity | DbFailure
ReservationLookupFailure: TypeAlias = NotFound | DbFailure


def log_failure(failure: AppFailure, logger: logging.Logger) -> None:
    logger.warning("== FAILURE: [ %s ] == %s", failure.code.value, failure.message)
    if failure.cause is not None:
        logger.debug("caused by %r", failure.cause)
