from pydantic import ConfigDict, Field

from schemas.base import CamelModel, MessageOutputBase, MIN_DB_INT, MAX_DB_INT


class TableBase(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    table_number: int
    seats: int
    status: str


class CreateTable(CamelModel):
    table_number: int = Field(ge=MIN_DB_INT, le=MAX_DB_INT, description='테이블 번호. 고유해야 합니다', examples=[5])
    seats: int = Field(gt=0, le=MAX_DB_INT, description='좌석 수', examples=[4])


class TableCreatedOutput(MessageOutputBase):
    table_id: int
