# 공개 라우터 (인증 불필요)
# - GET /              : 환영 문구
# - GET /documentation : 정적 API 문서 (public/documentation.html)

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse, PlainTextResponse

from ..core.config import settings

router = APIRouter(tags=["public"])

@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Welcome to myFlix App"

@router.get("/documentation", response_class=FileResponse)
async def documentation():
    path = settings.DOCUMENTATION_PATH
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Documentation not found")
    return FileResponse(path, media_type="text/html")
