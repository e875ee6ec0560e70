from pydantic import SecretStr
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from exception.exceptions import InvalidInputError, DuplicateUserError, InvalidCredentialsError
from logger_config import logger
from repository.user_repository import UserRepository
from schemas.user import RegisterUser, LoginUser, LoginOutput
from service.password_hasher import BcryptPasswordHasher, MAX_PASSWORD_BYTES
from service.token_service import TokenService


class UserService:
    def __init__(self, session: Session):
        self.session = session
        self.repository = UserRepository(session)
        self.password_hasher = BcryptPasswordHasher()

    def register(self, new_user: RegisterUser) -> int:
        """
        유저를 생성하고 id를 반환합니다. 비밀번호는 해시로만 저장됩니다.
        """
        password = new_user.password.get_secret_value()
        if not new_user.username or not password:
            raise InvalidInputError('Missing username or password')

        if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise InvalidInputError(f'Password must be at most {MAX_PASSWORD_BYTES} bytes')

        if self.repository.exist_by_username(new_user.username):
            raise DuplicateUserError()

        password_hash = self.password_hasher.hash_password(plain_password=new_user.password)

        try:
            user = self.repository.create(new_user.username, password_hash)
        except IntegrityError as exc:
            # 동시에 같은 username으로 가입한 경우
            self.session.rollback()
            raise DuplicateUserError() from exc

        logger.info('User {} registered with id {}', user.username, user.id)
        return user.id

    def verify(self, username: str, password: SecretStr) -> int:
        user = self.repository.get_by_username(username)

        if not user or not self.password_hasher.verify_password(plain_password=password,
                                                                 hashed_password=user.password_hash):
            logger.warning('Failed login attempt for {}', username)
            raise InvalidCredentialsError()

        return user.id

    def login(self, login_user: LoginUser, token_service: TokenService) -> LoginOutput:
        user_id = self.verify(login_user.username, login_user.password)

        return LoginOutput(token=token_service.issue(user_id))
