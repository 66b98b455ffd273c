from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, List

from returns.maybe import Maybe
from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from ..domain.errors import DbFailure, ParsingFailure
from ..domain.repositories import ReservationPredicate, ReservationRepository
from ..models import Reservation
from .codec import ReservationCodec

logger = logging.getLogger(__name__)


class FileReservationRepository(ReservationRepository):
    """
    Append-only flat-file store: one encoded reservation per line.

    Reads load and decode the whole file; a single bad line fails the read.
    Assumes a single writer process.
    """

    def __init__(self, path: str | Path, *, codec: ReservationCodec | None = None) -> None:
        self.path = Path(path)
        self.codec = codec or ReservationCodec()

    def _ensure_file(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)

    def _read_text(self) -> str:
        self._ensure_file()
        return self.path.read_text(encoding="utf-8")

    def _append_line(self, line: str) -> None:
        self._ensure_file()
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")

    async def _load(self) -> Result[List[Reservation], DbFailure]:
        try:
            content = await asyncio.to_thread(self._read_text)
        except UnicodeDecodeError as exc:
            logger.warning("reservations file %s is not valid UTF-8: %s", self.path, exc)
            return Failure(DbFailure.from_failure(ParsingFailure.create(exc)))
        except OSError as exc:
            logger.warning("failed to read reservations file %s: %s", self.path, exc)
            return Failure(DbFailure.create(exc))

        reservations: List[Reservation] = []
        lines = [line for line in content.split("\n") if line.strip()]
        for lineno, line in enumerate(lines, start=1):
            decoded = self.codec.decode(line)
            if not is_successful(decoded):
                parsing = decoded.failure()
                logger.warning("corrupt record #%d in %s: %s", lineno, self.path, parsing.message)
                return Failure(DbFailure.from_failure(parsing))
            reservations.append(decoded.unwrap())
        logger.debug("loaded %d reservations from %s", len(reservations), self.path)
        return Success(reservations)

    async def find_when(self, predicate: ReservationPredicate) -> Result[List[Reservation], DbFailure]:
        return (await self._load()).map(lambda rs: [r for r in rs if predicate(r)])

    async def find_one_when(self, predicate: ReservationPredicate) -> Result[Maybe[Reservation], DbFailure]:
        return (await self._load()).map(lambda rs: Maybe.from_optional(next((r for r in rs if predicate(r)), None)))

    async def save_reservation(self, reservation: Reservation) -> Result[None, DbFailure]:
        line = self.codec.encode(reservation)
        try:
            await asyncio.to_thread(self._append_line, line)
        except OSError as exc:
            logger.warning("failed to append reservation %s to %s: %s", reservation.id, self.path, exc)
            return Failure(DbFailure.create(exc))
        return Success(None)


class InMemoryReservationRepository(ReservationRepository):
    """List-backed store with the same contract, for tests and local runs."""

    def __init__(self, initial: Iterable[Reservation] = ()) -> None:
        self._records: List[Reservation] = list(initial)

    async def find_when(self, predicate: ReservationPredicate) -> Result[List[Reservation], DbFailure]:
        return Success([r for r in self._records if predicate(r)])

    async def find_one_when(self, predicate: ReservationPredicate) -> Result[Maybe[Reservation], DbFailure]:
        return Success(Maybe.from_optional(next((r for r in self._records if predicate(r)), None)))

    async def save_reservation(self, reservation: Reservation) -> Result[None, DbFailure]:
        self._records.append(reservation)
        return Success(None)
