from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from .config import Settings, get_settings
from .domain.repositories import ReservationRepository
from .infrastructure.repositories import FileReservationRepository


@lru_cache
def _file_repository(path: Path) -> FileReservationRepository:
    # One instance per file so every request shares the same capacity lock.
    return FileReservationRepository(path)


async def get_reservation_repo(settings: Settings = Depends(get_settings)) -> ReservationRepository:
    return _file_repository(settings.reservations_path)


async def get_total_capacity(settings: Settings = Depends(get_settings)) -> int:
    return settings.total_capacity
