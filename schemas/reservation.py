from pydantic import Field

from schemas.base import CamelModel, MessageOutputBase, MIN_DB_INT, MAX_DB_INT


class MakeReservationInput(CamelModel):
    table_id: int = Field(ge=MIN_DB_INT, le=MAX_DB_INT, description='예약할 테이블의 `id`', examples=[1])
    customer_name: str = Field(min_length=1, description='예약자 이름', examples=['Alice'])
    date: str = Field(min_length=1, description='예약 날짜', examples=['2024-01-01'])
    time: str = Field(min_length=1, description='예약 시간', examples=['19:00'])


class ReservationCreatedOutput(MessageOutputBase):
    reservation_id: int
