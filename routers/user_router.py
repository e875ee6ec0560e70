from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db.database import get_db
from schemas import user
from service.token_service import TokenService, get_token_service
from service.user_service import UserService

user_router = APIRouter(
    tags=['유저']
)


@user_router.post('/register', response_model=user.RegisterOutput, name='회원가입', responses={
    400: {
        "description": "`username` 또는 `password`가 비어있는 경우",
        "content": {
            "application/json": {
                "example": {"kind": "InvalidInput", "detail": "Missing username or password"}
            }
        }
    },
    500: {
        "description": "이미 존재하는 `username`인 경우",
        "content": {
            "application/json": {
                "example": {"kind": "DuplicateUser", "detail": "User already exists"}
            }
        }
    }
})
def register(register_user: user.RegisterUser, db: Session = Depends(get_db)):
    """
    새로운 유저를 등록합니다. `username`은 고유해야 합니다.
    """
    user_service = UserService(db)
    user_id = user_service.register(register_user)
    return user.RegisterOutput(message='User registered successfully', user_id=user_id)


@user_router.post('/login', response_model=user.LoginOutput, name='로그인', responses={
    400: {
        "description": "잘못된 로그인 정보",
        "content": {
            "application/json": {
                "example": {"kind": "InvalidCredentials", "detail": "Invalid credentials"}
            }
        }
    }
})
def login(login_user: user.LoginUser,
          token_service: Annotated[TokenService, Depends(get_token_service)],
          db: Session = Depends(get_db)):
    """
    입력한 `username`과 `password`로 로그인을 합니다.
    로그인에 성공할 경우 jwt token을 반환합니다. token의 유효기간은 생성일부터 1시간입니다.
    """
    user_service = UserService(db)
    return user_service.login(login_user, token_service)
