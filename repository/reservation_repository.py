from sqlalchemy.orm import Session
from db.models import Reservation, ReservationStatus


class ReservationRepository:
    def __init__(self, session: Session):
        self.session = session

    def add(self, table_id: int, customer_name: str, date: str, time: str,
            status: ReservationStatus = ReservationStatus.CONFIRMED) -> Reservation:
        """
        예약을 세션에 추가하고 id를 받기 위해 flush만 합니다. commit은 호출하는 쪽에서 합니다.
        """
        reservation = Reservation(table_id=table_id, customer_name=customer_name, date=date, time=time,
                                  status=status.value)
        self.session.add(reservation)
        self.session.flush()

        return reservation
