import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from returns.pipeline import is_successful

from ..deps import get_reservation_repo, get_total_capacity
from ..domain.errors import AppFailure, FailureCode, log_failure
from ..domain.repositories import ReservationRepository
from ..schemas import ReservationCreate, ReservationRead
from ..usecases import reservations as reservation_usecase
from ..utils.audit_log import emit_audit_log

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reservations", tags=["reservations"])

_STATUS_BY_CODE = {
    FailureCode.INVALID_NAME: status.HTTP_400_BAD_REQUEST,
    FailureCode.INVALID_SEATS: status.HTTP_400_BAD_REQUEST,
    FailureCode.NO_CAPACITY: status.HTTP_412_PRECONDITION_FAILED,
    FailureCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _to_http_error(failure: AppFailure) -> HTTPException:
    log_failure(failure, logger)
    status_code = _STATUS_BY_CODE.get(failure.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        # Storage details stay out of the response body.
        return HTTPException(status_code=status_code, detail="internal server error")
    return HTTPException(status_code=status_code, detail=failure.to_dict())


@router.post("", response_model=ReservationRead, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    payload: ReservationCreate,
    repo: ReservationRepository = Depends(get_reservation_repo),
    total_capacity: int = Depends(get_total_capacity),
) -> ReservationRead:
    result = await reservation_usecase.try_accept_reservation(
        repo,
        total_capacity=total_capacity,
        client_name=payload.client_name,
        seats=payload.seats,
    )
    if not is_successful(result):
        raise _to_http_error(result.failure())

    reservation = result.unwrap()
    try:
        emit_audit_log(
            action="reservation.accepted",
            initiator="client",
            reservation_id=reservation.id,
            client_name=reservation.client_name,
            seats=reservation.seats,
            date=reservation.date,
        )
    except RuntimeError as exc:
        logger.error("audit log failed for reservation %s: %s", reservation.id, exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="audit log failed") from exc

    return ReservationRead.from_domain(reservation=reservation)


@router.get("/client/{client_name}", response_model=List[ReservationRead])
async def list_last_client_reservations(
    client_name: str = Path(..., min_length=1),
    count: int = Query(..., ge=0),
    repo: ReservationRepository = Depends(get_reservation_repo),
) -> list[ReservationRead]:
    result = await reservation_usecase.get_last_client_reservations(repo, client_name=client_name, count=count)
    if not is_successful(result):
        raise _to_http_error(result.failure())
    return [ReservationRead.from_domain(reservation=r) for r in result.unwrap()]


@router.get("/{reservation_id}", response_model=ReservationRead)
async def get_reservation(
    reservation_id: str = Path(..., min_length=1),
    repo: ReservationRepository = Depends(get_reservation_repo),
) -> ReservationRead:
    result = await reservation_usecase.get_reservation_by_id(repo, reservation_id=reservation_id)
    if not is_successful(result):
        raise _to_http_error(result.failure())
    return ReservationRead.from_domain(reservation=result.unwrap())
