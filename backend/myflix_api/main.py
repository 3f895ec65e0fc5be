# FastAPI 진입점
# - 로깅 설정
# - Beanie ODM 초기화 (MongoDB)
# - CORS 허용 목록 검사
# - 예외 -> HTTP 응답 변환
# - 라우터 등록

import logging
import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from pymongo.errors import PyMongoError

from .core.config import settings
from .core.cors import setup_cors
from .core.exceptions import MyflixError
from .models.user import User
from .models.movie import Movie
from .api.auth import router as auth_router
from .api.users import router as users_router
from .api.movies import router as movies_router
from .api.docs import router as docs_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title="myFlix API",
    description="영화 정보와 사용자 즐겨찾기 목록을 제공하는 REST API",
    version="1.0.0"
)

# CORS 허용 도메인 세팅 (목록에 없는 Origin은 403)
setup_cors(app, settings.cors_origins)

# 요청 로그 (method, path, status, 처리 시간)
@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    # 처리되지 않은 예외로 끝난 요청도 500으로 남긴다
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        logger.info(f'{client} "{request.method} {request.url.path}" {status_code} {elapsed_ms:.1f}ms')

# Beanie 초기화 (앱 시작 시 1회)
@app.on_event("startup")
async def app_init():
    try:
        client = AsyncIOMotorClient(settings.CONNECTION_URI, serverSelectionTimeoutMS=5000)
        # 연결 테스트
        await client.admin.command('ping')

        db = client[settings.DB_NAME]
        await init_beanie(database=db, document_models=[User, Movie])
        logger.info(f"MongoDB 연결 성공: {settings.DB_NAME}")
    except Exception as e:
        # MongoDB 연결 실패 시에도 서버는 시작됩니다. DB가 필요한 요청은 500으로 응답합니다.
        logger.warning(f"MongoDB 연결 실패: {e}")

# ---- 예외 핸들러 ----

def format_validation_errors(errors) -> list:
    formatted = []
    for err in errors:
        loc = err.get("loc") or ("body",)
        ctx_error = (err.get("ctx") or {}).get("error")
        formatted.append({
            "location": loc[0],
            "param": ".".join(str(p) for p in loc[1:]),
            "msg": str(ctx_error) if isinstance(ctx_error, Exception) else err.get("msg"),
        })
    return formatted

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=422, content={"errors": format_validation_errors(exc.errors())})

@app.exception_handler(MyflixError)
async def myflix_exception_handler(request: Request, exc: MyflixError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)

@app.exception_handler(PyMongoError)
async def database_exception_handler(request: Request, exc: PyMongoError):
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return PlainTextResponse(f"Error: {exc}", status_code=500)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return PlainTextResponse("There was an error. Please try again.", status_code=500)

# 라우터 등록 (기존 클라이언트와 호환되도록 prefix 없이)
app.include_router(docs_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(movies_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("myflix_api.main:app", host=settings.HOST, port=settings.PORT)
