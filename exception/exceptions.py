class CustomBaseError(Exception):
    """
    모든 도메인 에러의 부모 클래스입니다. `kind`는 클라이언트가 에러 종류를 구분할 때 사용하는 고정 값입니다.
    """
    kind = 'Error'

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidInputError(CustomBaseError):
    kind = 'InvalidInput'

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class DuplicateUserError(CustomBaseError):
    kind = 'DuplicateUser'

    def __init__(self, message: str = 'User already exists') -> None:
        super().__init__(message, 500)


class DuplicateTableError(CustomBaseError):
    kind = 'DuplicateTable'

    def __init__(self, message: str = 'Table already exists') -> None:
        super().__init__(message, 500)


class InvalidCredentialsError(CustomBaseError):
    kind = 'InvalidCredentials'

    def __init__(self, message: str = 'Invalid credentials') -> None:
        super().__init__(message, 400)


class InvalidTokenError(CustomBaseError):
    kind = 'InvalidToken'

    def __init__(self, message: str = 'Invalid token') -> None:
        super().__init__(message, 401)


class UnauthorizedError(CustomBaseError):
    kind = 'Unauthorized'

    def __init__(self, message: str = 'Invalid token') -> None:
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    kind = 'Forbidden'

    def __init__(self, message: str = 'Access denied') -> None:
        super().__init__(message, 403)


class TableNotFoundError(CustomBaseError):
    kind = 'TableNotFound'

    def __init__(self, message: str = 'Table not found') -> None:
        super().__init__(message, 400)


class TableUnavailableError(CustomBaseError):
    kind = 'TableUnavailable'

    def __init__(self, message: str = 'Table not available') -> None:
        super().__init__(message, 400)


class StoreFailureError(CustomBaseError):
    kind = 'StoreFailure'

    def __init__(self, message: str = 'Storage is unavailable') -> None:
        super().__init__(message, 500)
