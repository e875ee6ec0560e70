import enum

from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint, Index, text
from sqlalchemy.orm import relationship

from db.database import Base


class TableStatus(str, enum.Enum):
    AVAILABLE = 'Available'
    RESERVED = 'Reserved'


class ReservationStatus(str, enum.Enum):
    # PENDING은 컬럼 기본값으로만 남아있습니다. 예약 생성 시에는 항상 CONFIRMED로 저장됩니다.
    PENDING = 'Pending'
    CONFIRMED = 'Confirmed'


class User(Base):
    """
    유저를 나타내는 클래스입니다. 비밀번호는 bcrypt 해시로만 저장됩니다.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, nullable=False)
    username = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)


class Table(Base):
    """
    식당의 테이블을 나타내는 클래스입니다. 예약 가능 여부는 `status` 필드로 구분합니다.
    `status`는 예약 처리(`ReservationService`)에서만 변경됩니다.
    """
    __tablename__ = 'tables'

    id = Column(Integer, primary_key=True, nullable=False)
    table_number = Column(Integer, nullable=False, unique=True)
    seats = Column(Integer, nullable=False)
    status = Column(String, nullable=False, default=TableStatus.AVAILABLE.value)

    reservations = relationship('Reservation', back_populates='table')

    __table_args__ = (
        CheckConstraint('seats > 0', name='ck_tables_seats_positive'),
    )


class Reservation(Base):
    """
    테이블 예약을 나타내는 클래스입니다. 한 테이블에는 확정(`Confirmed`)된 예약이 최대 하나만 존재합니다.
    """
    __tablename__ = 'reservations'

    id = Column(Integer, primary_key=True, nullable=False)
    table_id = Column(Integer, ForeignKey('tables.id'), nullable=False)
    table = relationship('Table', back_populates='reservations')
    customer_name = Column(String, nullable=False)
    date = Column(String, nullable=False)
    time = Column(String, nullable=False)
    status = Column(String, nullable=False, default=ReservationStatus.PENDING.value)

    # 테이블당 확정 예약 1개
    __table_args__ = (
        Index(
            'uq_reservations_confirmed_table_id',
            'table_id',
            unique=True,
            sqlite_where=text("status = 'Confirmed'"),
            postgresql_where=text("status = 'Confirmed'"),
        ),
    )
