# 인증 라우터
# - 로그인: POST /login (Username/Password 확인 후 JWT 발급, 유효기간 7일)

from fastapi import APIRouter, Depends

from ..schemas.user_schema import LoginRequest, LoginResponse
from ..services.auth_service import AuthService, get_auth_service

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=LoginResponse, summary="로그인 (JWT Access 토큰 발급)")
async def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    return await service.login(payload.Username, payload.Password)
