from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from auth.auth_bearer import get_current_user
from db.database import get_db
from schemas import reservation
from service.reservation_service import ReservationService

reservation_router = APIRouter(
    prefix='/reservations',
    tags=['예약']
)


@reservation_router.post('', dependencies=[Depends(get_current_user)], response_model=reservation.ReservationCreatedOutput,
                         name='테이블 예약', responses={
    400: {
        "description": "`tableId`값을 가진 테이블이 없거나 이미 예약된 경우",
        "content": {
            "application/json": {
                "example": {"kind": "TableUnavailable", "detail": "Table not available"}
            }
        }
    },
    401: {
        "description": "토큰이 유효하지 않거나 만료된 경우",
        "content": {
            "application/json": {
                "example": {"kind": "Unauthorized", "detail": "Invalid token"}
            }
        }
    },
    403: {
        "description": "`Authorization` 헤더가 없는 경우",
        "content": {
            "application/json": {
                "example": {"kind": "Forbidden", "detail": "Access denied"}
            }
        }
    }
})
def make_reservation(make_reservation_request: reservation.MakeReservationInput,
                     db: Session = Depends(get_db)):
    """
    테이블을 예약합니다. 예약은 바로 확정(`Confirmed`)되고 테이블은 `Reserved` 상태가 됩니다.
    동시에 같은 테이블을 예약하는 경우 하나의 요청만 성공하고 나머지는 `TableUnavailable`을 받습니다.
    """
    reservation_service = ReservationService(db)
    reservation_id = reservation_service.reserve(make_reservation_request)
    return reservation.ReservationCreatedOutput(message='Reservation confirmed', reservation_id=reservation_id)
