# 영화 라우터 (모두 Bearer 토큰 필요, 읽기 전용)
# - GET /movies
# - GET /movies/{title}
# - GET /movies/genres/{name}    : 해당 장르를 가진 첫 영화의 Genre 서브 문서
# - GET /movies/directors/{name} : 해당 감독을 가진 첫 영화의 Director 서브 문서

from typing import List, Optional
from fastapi import APIRouter, Depends

from ..core.security import get_current_username
from ..models.movie import MovieDirector, MovieGenre
from ..schemas.movie_schema import MoviePublic
from ..services.movie_service import MovieService, get_movie_service

router = APIRouter(prefix="/movies", tags=["movies"], dependencies=[Depends(get_current_username)])

@router.get("", response_model=List[MoviePublic], summary="전체 영화 목록")
async def list_movies(service: MovieService = Depends(get_movie_service)):
    return await service.list_movies()

@router.get("/genres/{name}", response_model=MovieGenre, summary="장르 정보 조회")
async def get_genre(name: str, service: MovieService = Depends(get_movie_service)):
    return await service.get_genre(name)

@router.get("/directors/{name}", response_model=MovieDirector, summary="감독 정보 조회")
async def get_director(name: str, service: MovieService = Depends(get_movie_service)):
    return await service.get_director(name)

@router.get("/{title}", response_model=Optional[MoviePublic], summary="제목으로 영화 조회 (없으면 null)")
async def get_movie(title: str, service: MovieService = Depends(get_movie_service)):
    return await service.get_movie(title)
