from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from db.models import TableStatus, ReservationStatus
from exception.exceptions import TableNotFoundError, TableUnavailableError, StoreFailureError
from logger_config import logger
from repository.reservation_repository import ReservationRepository
from repository.table_repository import TableRepository
from schemas.reservation import MakeReservationInput


class ReservationService:
    """
    테이블 예약을 처리합니다. 테이블 상태 변경(`Available` -> `Reserved`)과 예약 생성은 하나의 트랜잭션으로 commit 됩니다.
    """

    def __init__(self, session: Session):
        self.session = session
        self.table_repository = TableRepository(session)
        self.reservation_repository = ReservationRepository(session)

    def reserve(self, new_reservation: MakeReservationInput) -> int:
        table_id = new_reservation.table_id

        try:
            table = self.table_repository.get_by_id(table_id)

            if not table:
                raise TableNotFoundError()

            if table.status != TableStatus.AVAILABLE.value:
                raise TableUnavailableError()

            if not self.table_repository.compare_and_set_status(table_id, TableStatus.AVAILABLE,
                                                                TableStatus.RESERVED):
                self.session.rollback()
                logger.warning('Table {} was reserved by a concurrent request', table_id)
                raise TableUnavailableError()

            reservation = self.reservation_repository.add(
                table_id=table_id,
                customer_name=new_reservation.customer_name,
                date=new_reservation.date,
                time=new_reservation.time,
                status=ReservationStatus.CONFIRMED,
            )
            reservation_id = reservation.id
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning('Table {} already has a confirmed reservation', table_id)
            raise TableUnavailableError() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception('Failed to reserve table {}', table_id)
            raise StoreFailureError() from exc

        logger.info('Reservation {} confirmed for table {} ({} {})', reservation_id, table_id,
                    new_reservation.date, new_reservation.time)
        return reservation_id
