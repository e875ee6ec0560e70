import bcrypt
import pytest
from pydantic import SecretStr

from db.models import User
from exception.exceptions import DuplicateUserError, InvalidCredentialsError, InvalidInputError
from schemas.user import RegisterUser
from service.user_service import UserService
from tests.test_main import client, test_db, test_db_with_users, token_service, TestingSessionLocal, TEST_PASSWORD


class TestUserRoute:
    def test_register_should_return_200_when_successful(self, test_db):
        response = client.post(
            "/register",
            json={
                "username": 'alice',
                "password": 'secret'
            }
        )

        assert response.status_code == 200, response.text
        data = response.json()
        assert data['message'] == 'User registered successfully'
        assert 'userId' in data

    def test_register_should_store_hashed_password(self, test_db):
        client.post("/register", json={"username": 'alice', "password": 'secret'})

        session = TestingSessionLocal()
        user = session.query(User).filter_by(username='alice').first()
        session.close()

        assert user.password_hash != 'secret'
        assert bcrypt.checkpw(b'secret', user.password_hash.encode('utf-8'))

    def test_register_should_return_400_when_request_body_not_have_required_fields(self, test_db):
        response = client.post(
            "/register",
            json={
                "username": 'alice',
            }
        )

        assert response.status_code == 400, response.text
        assert response.json()['kind'] == 'InvalidInput'

    @pytest.mark.parametrize("username, password", [('', 'secret'), ('alice', '')])
    def test_register_should_return_400_when_field_is_empty(self, username, password, test_db):
        response = client.post(
            "/register",
            json={
                "username": username,
                "password": password
            }
        )

        assert response.status_code == 400, response.text
        assert response.json() == {'kind': 'InvalidInput', 'detail': 'Missing username or password'}

    @pytest.mark.parametrize("body", [
        '{"username": "alice", "password": "\\ud800"}',
        '{"username": "\\udfff", "password": "secret"}',
    ])
    def test_register_should_return_400_when_field_is_not_utf8_text(self, body, test_db):
        # json escape로 보낸 lone surrogate는 파싱은 되지만 utf-8로 인코딩할 수 없습니다
        response = client.post(
            "/register",
            content=body,
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400, response.text
        assert response.json()['kind'] == 'InvalidInput'

    def test_register_should_return_500_when_username_already_exists(self, test_db_with_users):
        response = client.post(
            "/register",
            json={
                "username": 'user 1',
                "password": 'another password'
            }
        )

        assert response.status_code == 500, response.text
        assert response.json() == {'kind': 'DuplicateUser', 'detail': 'User already exists'}

    def test_login_should_return_400_when_credential_not_correct(self, test_db_with_users):
        response = client.post(
            "/login",
            json={
                "username": 'user 1',
                "password": 'wrong password'
            }
        )

        assert response.status_code == 400, response.text
        assert response.json() == {'kind': 'InvalidCredentials', 'detail': 'Invalid credentials'}

    def test_login_should_return_400_when_user_not_exist(self, test_db_with_users):
        response = client.post(
            "/login",
            json={
                "username": 'invalid id',
                "password": TEST_PASSWORD
            }
        )

        assert response.status_code == 400, response.text
        assert response.json()['kind'] == 'InvalidCredentials'

    def test_login_should_return_token_when_successful_login(self, test_db_with_users):
        response = client.post(
            "/login",
            json={
                "username": 'user 1',
                "password": TEST_PASSWORD
            }
        )

        assert response.status_code == 200, response.text
        data = response.json()

        assert 'token' in data.keys()
        assert token_service.validate(data['token']) == 1

    def test_register_then_login_should_return_token_of_new_user(self, test_db):
        register_response = client.post("/register", json={"username": 'bob', "password": 'pw'})
        user_id = register_response.json()['userId']

        response = client.post("/login", json={"username": 'bob', "password": 'pw'})

        assert response.status_code == 200, response.text
        assert token_service.validate(response.json()['token']) == user_id


class TestUserService:
    def test_register_same_username_twice_should_raise_duplicate_user(self, test_db):
        session = TestingSessionLocal()
        user_service = UserService(session)

        user_service.register(RegisterUser(username='alice', password='secret'))

        with pytest.raises(DuplicateUserError):
            user_service.register(RegisterUser(username='alice', password='other'))

        assert session.query(User).filter_by(username='alice').count() == 1
        session.close()

    def test_register_should_reject_password_longer_than_bcrypt_limit(self, test_db):
        session = TestingSessionLocal()

        with pytest.raises(InvalidInputError):
            UserService(session).register(RegisterUser(username='alice', password='a' * 73))

        session.close()

    def test_verify_should_return_user_id_after_register(self, test_db):
        session = TestingSessionLocal()
        user_service = UserService(session)

        user_id = user_service.register(RegisterUser(username='alice', password='secret'))

        assert user_service.verify('alice', SecretStr('secret')) == user_id
        session.close()

    def test_verify_should_raise_invalid_credentials_with_wrong_password(self, test_db):
        session = TestingSessionLocal()
        user_service = UserService(session)

        user_service.register(RegisterUser(username='alice', password='secret'))

        with pytest.raises(InvalidCredentialsError):
            user_service.verify('alice', SecretStr('wrong'))

        with pytest.raises(InvalidCredentialsError):
            user_service.verify('nobody', SecretStr('secret'))

        session.close()
