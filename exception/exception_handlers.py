from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import Response

from exception.exceptions import CustomBaseError, InvalidInputError, StoreFailureError
from logger_config import logger

ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _error_response(error: CustomBaseError, detail: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={'kind': error.kind, 'detail': error.message if detail is None else detail},
    )


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    return _error_response(error)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    # 요청 값(비밀번호 포함)은 응답에 다시 싣지 않습니다
    errors = [{key: value for key, value in error.items() if key != 'input'} for error in errors]
    return _error_response(InvalidInputError('Invalid request body'), jsonable_encoder(errors))


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error('Storage error on {} {}', request.method, request.url.path)
    return _error_response(StoreFailureError())


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error('Unhandled error on {} {}', request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'kind': 'Error', 'detail': 'Internal server error'},
    )


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    SQLAlchemyError: store_error_handler,
    Exception: general_500_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
