# Movie 도메인 모델 (Beanie Document)
# - 이 API에서는 읽기 전용 (데이터는 별도로 시딩)
# - Title/Genre/Director 외 필드는 의미 없이 그대로 통과시킨다

from typing import List, Optional
from beanie import Document
from pydantic import BaseModel, ConfigDict

class MovieGenre(BaseModel):
    model_config = ConfigDict(extra="allow")

    Name: str
    Description: Optional[str] = None

class MovieDirector(BaseModel):
    model_config = ConfigDict(extra="allow")

    Name: str
    Bio: Optional[str] = None

class Movie(Document):
    model_config = ConfigDict(extra="allow")

    Title: str
    Description: Optional[str] = None
    Genre: MovieGenre
    Director: MovieDirector
    Actors: List[str] = []
    ImagePath: Optional[str] = None
    Featured: Optional[bool] = None

    class Settings:
        name = "movies"
