import bcrypt
from pydantic import SecretStr

# bcrypt는 72 bytes 까지만 사용합니다
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher:
    """
    bcrypt로 salt가 포함된 해시를 만들고 검증합니다.
    """

    def hash_password(self, *, plain_password: SecretStr) -> str:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password_bytes, salt)
        return hashed.decode('utf-8')

    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        if len(password_bytes) > MAX_PASSWORD_BYTES:
            return False

        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
