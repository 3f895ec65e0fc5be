# 영화 서비스 레이어
# - 전체/제목별 조회, 장르·감독 서브 문서 추출
# - 응답 스키마로 옮길 때 선언되지 않은 필드(ImagePath 등)도 그대로 실어 보낸다

from typing import List, Optional
from fastapi import Depends
from pydantic import BaseModel
from ..repositories.movie_repository import MovieRepository
from ..core.exceptions import MovieNotFoundError
from ..models.movie import MovieDirector, MovieGenre
from ..schemas.movie_schema import MoviePublic

def to_public(movie: BaseModel) -> MoviePublic:
    return MoviePublic.model_validate(movie.model_dump(by_alias=True, exclude={"revision_id"}))

class MovieService:
    def __init__(self, repo: MovieRepository):
        self.repo = repo

    async def list_movies(self) -> List[MoviePublic]:
        return [to_public(movie) for movie in await self.repo.find_all()]

    async def get_movie(self, title: str) -> Optional[MoviePublic]:
        movie = await self.repo.get_by_title(title)
        return None if movie is None else to_public(movie)

    async def get_genre(self, name: str) -> MovieGenre:
        movie = await self.repo.get_by_genre(name)
        if movie is None:
            raise MovieNotFoundError("Genre", name)
        return movie.Genre

    async def get_director(self, name: str) -> MovieDirector:
        movie = await self.repo.get_by_director(name)
        if movie is None:
            raise MovieNotFoundError("Director", name)
        return movie.Director


def get_movie_service(repo: MovieRepository = Depends(MovieRepository)) -> MovieService:
    return MovieService(repo)
