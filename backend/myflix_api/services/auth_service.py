# 인증 서비스 레이어
# - 로그인 (비밀번호 검증, JWT 토큰 발급)

import logging
from fastapi import Depends
from ..repositories.user_repository import UserRepository
from ..core.exceptions import AuthenticationError
from ..core.security import verify_password, create_access_token

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def login(self, username: str, password: str) -> dict:
        user = await self.repo.get_by_username(username)
        if not user or not verify_password(password, user.Password):
            logger.info(f"[auth] Login failed for {username}")
            raise AuthenticationError("Incorrect username or password.")
        token = create_access_token(user.Username)
        return {"user": user, "token": token}


def get_auth_service(repo: UserRepository = Depends(UserRepository)) -> AuthService:
    return AuthService(repo)
