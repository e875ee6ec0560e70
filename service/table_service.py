from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List

from exception.exceptions import DuplicateTableError
from logger_config import logger
from repository.table_repository import TableRepository
from schemas.table import CreateTable, TableBase


class TableService:
    def __init__(self, session: Session):
        self.session = session
        self.repository = TableRepository(session)

    def add_table(self, current_user_id: int, new_table: CreateTable) -> int:
        if self.repository.exist_by_table_number(new_table.table_number):
            raise DuplicateTableError(f'Table {new_table.table_number} already exists')

        try:
            table = self.repository.create(new_table)
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateTableError(f'Table {new_table.table_number} already exists') from exc

        logger.info('Table {} ({} seats) added by user {}', table.table_number, table.seats, current_user_id)
        return table.id

    def list_available(self) -> List[TableBase]:
        return self.repository.get_available()
