# 사용자 서비스 레이어
# - 회원가입 (비밀번호 해싱 후 저장, Username 중복은 저장소에서 감지)
# - 프로필 조회/수정/삭제, 즐겨찾기 영화 추가/제거

import logging
from typing import List, Optional
from beanie import PydanticObjectId
from fastapi import Depends
from ..repositories.user_repository import UserRepository
from ..core.exceptions import UserNotFoundError
from ..core.security import get_password_hash
from ..models.user import User
from ..schemas.user_schema import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def register(self, payload: UserCreate) -> User:
        fields = payload.model_dump()
        fields["Password"] = get_password_hash(payload.Password)
        user = await self.repo.create(fields)
        logger.info(f"[users] Registered {payload.Username}")
        return user

    async def list_users(self) -> List[User]:
        return await self.repo.find_all()

    async def get_user(self, username: str) -> Optional[User]:
        return await self.repo.get_by_username(username)

    async def update_user(self, username: str, payload: UserUpdate) -> Optional[User]:
        # 본문에 명시된 필드만 $set (빠진 필드를 null로 덮어쓰지 않음)
        fields = payload.model_dump(exclude_unset=True)
        if fields.get("Password") is not None:
            fields["Password"] = get_password_hash(fields["Password"])
        # Username/Password/Email은 null로 지울 수 없다
        for key in ("Username", "Password", "Email"):
            if key in fields and fields[key] is None:
                del fields[key]
        return await self.repo.update(username, fields)

    async def add_favorite(self, username: str, movie_id: PydanticObjectId) -> Optional[User]:
        return await self.repo.push_favorite(username, movie_id)

    async def remove_favorite(self, username: str, movie_id: PydanticObjectId) -> Optional[User]:
        return await self.repo.pull_favorite(username, movie_id)

    async def delete_user(self, username: str) -> None:
        removed = await self.repo.delete(username)
        if not removed:
            raise UserNotFoundError(username)
        logger.info(f"[users] Deleted {username}")


def get_user_service(repo: UserRepository = Depends(UserRepository)) -> UserService:
    return UserService(repo)
