import datetime
from typing import Optional

import jwt

import config
from exception.exceptions import InvalidTokenError


class TokenService:
    """
    유저 id와 만료 시간을 담은 JWT를 발급하고 검증합니다. 폐기(revoke) 기능은 없으며 토큰은 만료될 때까지 유효합니다.
    """

    def __init__(self, secret: str, lifetime_seconds: int = config.TOKEN_LIFETIME_SECONDS,
                 algorithm: str = config.JWT_ALGORITHM):
        self.secret = secret
        self.lifetime_seconds = lifetime_seconds
        self.algorithm = algorithm

    def issue(self, user_id: int, issued_at: Optional[datetime.datetime] = None) -> str:
        issued_at = issued_at or datetime.datetime.now(datetime.UTC)
        payload = {
            'sub': str(user_id),
            'iat': issued_at,
            'exp': issued_at + datetime.timedelta(seconds=self.lifetime_seconds)
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def validate(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm],
                                 options={'require': ['exp', 'sub']})
            return int(payload['sub'])
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError('Token has expired') from exc
        except (jwt.PyJWTError, ValueError) as exc:
            raise InvalidTokenError() from exc


def get_token_service() -> TokenService:
    return TokenService(config.JWT_SECRET)
