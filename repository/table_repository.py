from sqlalchemy import update
from sqlalchemy.orm import Session
from typing import List, Optional

from db.models import Table, TableStatus
from schemas.table import TableBase, CreateTable


class TableRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, _id: int) -> Optional[Table]:
        return self.session.query(Table).filter_by(id=_id).first()

    def get_available(self) -> List[TableBase]:
        tables = self.session.query(Table) \
            .filter(Table.status == TableStatus.AVAILABLE.value) \
            .order_by(Table.table_number).all()

        return [TableBase.model_validate(table) for table in tables]

    def exist_by_table_number(self, table_number: int) -> bool:
        table = self.session.query(Table).filter_by(table_number=table_number).first()
        return table is not None

    def create(self, data: CreateTable) -> TableBase:
        table = Table(table_number=data.table_number, seats=data.seats, status=TableStatus.AVAILABLE.value)
        self.session.add(table)
        self.session.commit()
        self.session.refresh(table)

        return TableBase.model_validate(table)

    def compare_and_set_status(self, _id: int, expected: TableStatus, new: TableStatus) -> bool:
        """
        `status`가 `expected`인 경우에만 `new`로 변경합니다. 조건 검사와 변경이 하나의 UPDATE 문으로 실행되므로
        동시에 들어온 요청 중 하나만 성공합니다. commit은 호출하는 쪽에서 합니다.
        """
        stmt = update(Table) \
            .where(Table.id == _id, Table.status == expected.value) \
            .values(status=new.value)
        result = self.session.execute(stmt)

        return result.rowcount == 1
