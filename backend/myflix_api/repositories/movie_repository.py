# 영화 저장소 레이어 (읽기 전용)

from typing import List, Optional
from ..models.movie import Movie

class MovieRepository:
    async def find_all(self) -> List[Movie]:
        return await Movie.find_all().to_list()

    async def get_by_title(self, title: str) -> Optional[Movie]:
        return await Movie.find_one(Movie.Title == title)

    async def get_by_genre(self, name: str) -> Optional[Movie]:
        return await Movie.find_one({"Genre.Name": name})

    async def get_by_director(self, name: str) -> Optional[Movie]:
        return await Movie.find_one({"Director.Name": name})
