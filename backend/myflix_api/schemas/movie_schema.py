# 영화 응답 스키마
# - 알 수 없는 필드도 그대로 클라이언트에 전달 (extra="allow")

from typing import Any, Optional
from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field

from ..models.movie import MovieGenre, MovieDirector

class MoviePublic(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[PydanticObjectId] = Field(default=None, alias="_id")
    Title: str
    Genre: MovieGenre
    Director: MovieDirector
    # Beanie 내부 필드는 응답에서 제외
    revision_id: Optional[Any] = Field(default=None, exclude=True)
