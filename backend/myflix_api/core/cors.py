# CORS 설정
# - 허용 목록(allow-list)에 없는 Origin은 요청 자체를 거부 (403)
# - Origin 헤더가 없는 요청(서버 간 호출, curl 등)은 항상 허용
# - 허용된 Origin에는 Starlette CORSMiddleware가 CORS 헤더를 붙인다

import logging
from typing import Iterable, Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

def is_origin_allowed(origin: Optional[str], allowed_origins: Iterable[str]) -> bool:
    if not origin:
        return True
    return origin in allowed_origins

def setup_cors(app: FastAPI, allowed_origins: list) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 나중에 등록한 미들웨어가 바깥쪽에서 먼저 실행되므로 거부 검사가 CORSMiddleware보다 앞선다
    @app.middleware("http")
    async def reject_disallowed_origin(request: Request, call_next):
        origin = request.headers.get("origin")
        if not is_origin_allowed(origin, allowed_origins):
            logger.warning(f"[CORS] Rejected request from origin {origin}")
            return PlainTextResponse(
                f"The CORS policy for this application doesn't allow access from origin {origin}",
                status_code=403,
            )
        return await call_next(request)
