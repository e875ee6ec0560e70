from pydantic import Field, SecretStr

from schemas.base import CamelModel, MessageOutputBase


class RegisterUser(CamelModel):
    username: str = Field(description='유저 아이디', examples=['alice'])
    password: SecretStr = Field(description='비밀번호', examples=['password'])


class LoginUser(CamelModel):
    username: str = Field(description='유저 아이디', examples=['alice'])
    password: SecretStr = Field(description='비밀번호', examples=['password'])


class RegisterOutput(MessageOutputBase):
    user_id: int


class LoginOutput(CamelModel):
    token: str
