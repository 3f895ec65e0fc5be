# User 도메인 모델 (Beanie Document)
# - Username, 비밀번호 해시, 이메일, 생일, 즐겨찾기 영화 목록
# - Username은 unique 인덱스 (동시 가입 경쟁 조건을 DB가 막는다)

from datetime import datetime
from typing import List, Optional
from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field

class User(Document):
    Username: Indexed(str, unique=True)  # 중복 방지 인덱스
    Password: str = Field(repr=False)  # 항상 bcrypt 해시만 저장
    Email: str
    Birthday: Optional[datetime] = None
    # Movie._id 약한 참조. 존재 여부/중복 검사 없음
    FavoriteMovies: List[PydanticObjectId] = Field(default_factory=list)

    class Settings:
        name = "users"  # 컬렉션명
