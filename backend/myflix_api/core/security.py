# 보안/인증 유틸리티
# - 비밀번호 해싱/검증
# - JWT 토큰 생성/검증 (Username을 subject로 사용)
# - 현재 사용자 이름 가져오기(의존성). DB 조회 없이 토큰만으로 판단한다.

from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from passlib.context import CryptContext
import jwt

from .config import settings
from .exceptions import AuthenticationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_token(subject: dict, expires_delta: timedelta, secret: Optional[str] = None) -> str:
    now = datetime.now(tz=timezone.utc)
    payload = {
        "exp": now + expires_delta,
        "iat": now,
        "nbf": now,
        **subject,
    }
    token = jwt.encode(payload, secret or settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token

def create_access_token(username: str) -> str:
    return create_token({"sub": username, "type": "access"}, timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS))

def decode_access_token(token: Optional[str], secret: Optional[str] = None) -> str:
    """서명과 만료를 검증하고 토큰의 subject(Username)를 반환합니다.

    토큰이 없거나, 형식이 깨졌거나, 서명이 틀렸거나, 만료된 경우
    AuthenticationError를 발생시킵니다. 폐기(revocation) 목록은 없습니다.
    """
    if not token:
        raise AuthenticationError("Not authenticated")
    try:
        payload = jwt.decode(token, secret or settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError:
        raise AuthenticationError()
    if payload.get("type") != "access":
        raise AuthenticationError()
    username = payload.get("sub")
    if not username:
        raise AuthenticationError()
    return username

async def get_current_username(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    return decode_access_token(token)
