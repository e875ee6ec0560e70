from typing import Any

from pydantic import BaseModel, ConfigDict, SecretStr, field_validator
from pydantic.alias_generators import to_camel

# DB의 INTEGER 컬럼 범위 (postgres 기준 32bit)
MIN_DB_INT = -2 ** 31
MAX_DB_INT = 2 ** 31 - 1


class CamelModel(BaseModel):
    """
    요청/응답 json은 camelCase(`tableNumber`)를, 파이썬 코드는 snake_case(`table_number`)를 사용합니다.
    문자열 필드는 utf-8로 인코딩할 수 있어야 합니다.
    """
    model_config = ConfigDict(extra='ignore', alias_generator=to_camel, populate_by_name=True)

    @field_validator('*')
    @classmethod
    def validate_utf8_text(cls, value: Any) -> Any:
        text = value.get_secret_value() if isinstance(value, SecretStr) else value
        if isinstance(text, str):
            try:
                text.encode('utf-8')
            except UnicodeEncodeError:
                raise ValueError('must be valid UTF-8 text')

        return value


class MessageOutputBase(CamelModel):
    message: str
