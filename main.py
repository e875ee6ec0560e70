from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from db import models
from db.database import engine
from exception.exception_handlers import register_exception_handlers
from logger_config import logger
from routers import api


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 설정이나 DB에 문제가 있으면 서버를 띄우지 않습니다
    if not config.JWT_SECRET:
        raise RuntimeError('JWT_SECRET is not configured')

    models.Base.metadata.create_all(bind=engine)
    logger.info('Database ready at {}', engine.url.render_as_string(hide_password=True))
    yield


description = """
테이블 예약 시스템 API
유저 인증, 테이블 관리, 테이블 예약을 처리합니다.

아래와 같은 ENDPOINT를 지원합니다
## 유저

* **회원가입**
* **로그인**

## 테이블
* **테이블 추가**
* **예약 가능한 테이블 조회**

## 예약
* **테이블 예약**
"""
tags_metadata = [
    {
        'name': '유저',
        'description': '유저와 관련된 API. **로그인** API도 여기에 있습니다'
    },
    {
        'name': '테이블',
        'description': '테이블 추가 및 조회 API'
    },
    {
        'name': '예약',
        'description': '테이블 예약 API. 한 테이블은 한 번만 예약할 수 있습니다'
    }
]

app = FastAPI(
    title='테이블 예약 API 문서',
    description=description,
    summary='테이블 예약 처리 시스템',
    openapi_tags=tags_metadata,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=['*'],
    allow_headers=['*'],
)

register_exception_handlers(app)

app.include_router(api.router)


if __name__ == '__main__':
    uvicorn.run('main:app', host=config.HOST, port=config.PORT)
