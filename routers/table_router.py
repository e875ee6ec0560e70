from typing import Annotated, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from auth.auth_bearer import get_current_user
from db.database import get_db
from schemas import table
from service.table_service import TableService

table_router = APIRouter(
    prefix='/tables',
    tags=['테이블']
)


@table_router.post('', response_model=table.TableCreatedOutput, name='테이블 추가', responses={
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
    },
    500: {
        "description": "같은 `tableNumber`를 가진 테이블이 이미 존재하는 경우",
        "content": {
            "application/json": {
                "example": {"kind": "DuplicateTable", "detail": "Table 5 already exists"}
            }
        }
    }
})
def add_table(create_table: table.CreateTable,
              current_user: Annotated[int, Depends(get_current_user)],
              db: Session = Depends(get_db)):
    """
    새로운 테이블을 추가합니다. 새 테이블은 `Available` 상태로 생성됩니다.
    """
    table_service = TableService(db)
    table_id = table_service.add_table(current_user, create_table)
    return table.TableCreatedOutput(message='Table added successfully', table_id=table_id)


@table_router.get('', response_model=List[table.TableBase], name='예약 가능한 테이블 조회')
def get_available_tables(db: Session = Depends(get_db)):
    """
    `Available` 상태인 테이블들을 테이블 번호 순으로 반환합니다.
    """
    table_service = TableService(db)
    return table_service.list_available()
