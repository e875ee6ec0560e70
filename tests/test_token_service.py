import datetime

import jwt
import pytest

from exception.exceptions import InvalidTokenError
from service.token_service import TokenService

SECRET = 'token-test-secret'


class TestTokenService:
    def test_issue_then_validate_should_return_user_id(self):
        token_service = TokenService(SECRET)

        token = token_service.issue(42)

        assert token_service.validate(token) == 42

    def test_issued_token_should_expire_after_one_hour_by_default(self):
        token_service = TokenService(SECRET)

        token = token_service.issue(1)

        payload = jwt.decode(token, SECRET, algorithms=['HS256'])
        assert payload['sub'] == '1'
        assert payload['exp'] - payload['iat'] == 60 * 60

    def test_validate_should_raise_when_token_expired(self):
        token_service = TokenService(SECRET)
        issued_at = datetime.datetime.now(datetime.UTC) - datetime.timedelta(hours=2)

        token = token_service.issue(1, issued_at=issued_at)

        with pytest.raises(InvalidTokenError):
            token_service.validate(token)

    def test_validate_should_raise_when_signed_with_other_secret(self):
        token = TokenService('other-secret').issue(1)

        with pytest.raises(InvalidTokenError):
            TokenService(SECRET).validate(token)

    @pytest.mark.parametrize("token", ['', 'invalid_token', 'a.b.c'])
    def test_validate_should_raise_when_token_malformed(self, token):
        with pytest.raises(InvalidTokenError):
            TokenService(SECRET).validate(token)

    def test_validate_should_raise_when_subject_missing(self):
        exp = datetime.datetime.now(datetime.UTC) + datetime.timedelta(hours=1)
        token = jwt.encode({'exp': exp}, SECRET, algorithm='HS256')

        with pytest.raises(InvalidTokenError):
            TokenService(SECRET).validate(token)

    def test_validate_should_raise_when_subject_not_integer(self):
        exp = datetime.datetime.now(datetime.UTC) + datetime.timedelta(hours=1)
        token = jwt.encode({'sub': 'alice', 'exp': exp}, SECRET, algorithm='HS256')

        with pytest.raises(InvalidTokenError):
            TokenService(SECRET).validate(token)
