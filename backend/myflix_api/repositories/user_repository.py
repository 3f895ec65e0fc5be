# 사용자 저장소 레이어
# - 데이터 접근(조회/생성/수정/삭제)만 담당 (서비스 로직 분리)
# - 모든 메서드는 MongoDB 왕복 1회, 재시도 없음. 드라이버 오류는 그대로 올려보낸다

from typing import Any, Dict, List, Optional
from beanie import PydanticObjectId, UpdateResponse
from beanie.operators import Pull, Push, Set
from pymongo.errors import DuplicateKeyError
from ..core.exceptions import UsernameTakenError
from ..models.user import User

class UserRepository:
    async def find_all(self) -> List[User]:
        return await User.find_all().to_list()

    async def get_by_username(self, username: str) -> Optional[User]:
        return await User.find_one(User.Username == username)

    async def create(self, fields: Dict[str, Any]) -> User:
        # 중복 검사는 unique 인덱스에 맡긴다 (조회 후 생성 사이의 경쟁 조건 없음)
        user = User(**fields)
        try:
            return await user.insert()
        except DuplicateKeyError:
            raise UsernameTakenError(fields["Username"])

    async def update(self, username: str, fields: Dict[str, Any]) -> Optional[User]:
        if not fields:
            return await self.get_by_username(username)
        try:
            return await User.find_one(User.Username == username).update(
                Set(fields), response_type=UpdateResponse.NEW_DOCUMENT
            )
        except DuplicateKeyError:
            raise UsernameTakenError(fields.get("Username", username))

    async def delete(self, username: str) -> bool:
        result = await User.find_one(User.Username == username).delete()
        return bool(result and result.deleted_count)

    async def push_favorite(self, username: str, movie_id: PydanticObjectId) -> Optional[User]:
        return await User.find_one(User.Username == username).update(
            Push({User.FavoriteMovies: movie_id}), response_type=UpdateResponse.NEW_DOCUMENT
        )

    async def pull_favorite(self, username: str, movie_id: PydanticObjectId) -> Optional[User]:
        return await User.find_one(User.Username == username).update(
            Pull({User.FavoriteMovies: movie_id}), response_type=UpdateResponse.NEW_DOCUMENT
        )
