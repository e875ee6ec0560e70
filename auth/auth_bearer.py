from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param

from exception.exceptions import ForbiddenError, UnauthorizedError, InvalidTokenError
from service.token_service import TokenService, get_token_service


class JWTBearer(HTTPBearer):
    """
    `Authorization: Bearer <token>` 헤더에서 토큰을 꺼냅니다.
    헤더가 없으면 403, 형식이 잘못된 경우 401을 반환합니다.
    """

    def __init__(self):
        super().__init__(auto_error=False, description='`Authorization: Bearer <token>`')

    async def __call__(self, request: Request) -> str:
        authorization = request.headers.get('Authorization')
        if not authorization:
            raise ForbiddenError()

        scheme, credentials = get_authorization_scheme_param(authorization)
        if scheme.lower() != 'bearer' or not credentials:
            raise UnauthorizedError()

        return credentials


jwt_bearer = JWTBearer()


async def get_current_user(token: Annotated[str, Depends(jwt_bearer)],
                           token_service: Annotated[TokenService, Depends(get_token_service)]) -> int:
    """
    토큰을 검증하고 유저 id를 반환합니다.
    """
    try:
        return token_service.validate(token)
    except InvalidTokenError as exc:
        raise UnauthorizedError(exc.message) from exc
