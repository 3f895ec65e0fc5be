# 사용자 라우터
# - POST /users : 회원가입, 인증 불필요
# - 나머지 /users 경로 : Bearer 토큰 필요

from typing import List, Optional
from beanie import PydanticObjectId
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from ..core.security import get_current_username
from ..schemas.user_schema import UserCreate, UserUpdate, UserPublic
from ..services.user_service import UserService, get_user_service

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED, summary="회원가입 (Username 중복 시 400)")
async def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    return await service.register(payload)

# ---- 이하 인증 필요 ----

requires_token = [Depends(get_current_username)]

@router.get("", response_model=List[UserPublic], dependencies=requires_token, summary="전체 사용자 목록")
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()

@router.get("/{username}", response_model=Optional[UserPublic], dependencies=requires_token, summary="Username으로 사용자 조회 (없으면 null)")
async def get_user(username: str, service: UserService = Depends(get_user_service)):
    return await service.get_user(username)

@router.put("/{username}", response_model=Optional[UserPublic], dependencies=requires_token, summary="사용자 정보 수정 (보낸 필드만 반영)")
async def update_user(username: str, payload: UserUpdate, service: UserService = Depends(get_user_service)):
    return await service.update_user(username, payload)

@router.post("/{username}/movies/{movie_id}", response_model=Optional[UserPublic], dependencies=requires_token, summary="즐겨찾기 영화 추가")
async def add_favorite_movie(username: str, movie_id: PydanticObjectId, service: UserService = Depends(get_user_service)):
    return await service.add_favorite(username, movie_id)

@router.delete("/{username}/movies/{movie_id}", response_model=Optional[UserPublic], dependencies=requires_token, summary="즐겨찾기 영화 제거")
async def remove_favorite_movie(username: str, movie_id: PydanticObjectId, service: UserService = Depends(get_user_service)):
    return await service.remove_favorite(username, movie_id)

@router.delete("/{username}", response_class=PlainTextResponse, dependencies=requires_token, summary="사용자 삭제 (없으면 400)")
async def delete_user(username: str, service: UserService = Depends(get_user_service)):
    await service.delete_user(username)
    return f"{username} was deleted."
