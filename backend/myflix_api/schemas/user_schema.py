# 요청/응답 스키마 정의 (Pydantic 모델)
# - 쓰기 요청은 DB에 닿기 전에 여기서 검증된다 (실패 시 422)

import re
from datetime import datetime
from typing import List, Optional
from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

USERNAME_MIN_LENGTH = 5
_ALPHANUMERIC = re.compile(r"^[A-Za-z0-9]+$")

def validate_username(value: str) -> str:
    if len(value) < USERNAME_MIN_LENGTH:
        raise ValueError("Username is required")
    if not _ALPHANUMERIC.match(value):
        raise ValueError("Username contains non alphanumeric characters - not allowed.")
    return value

def validate_password(value: str) -> str:
    if not value:
        raise ValueError("Password is required")
    return value

class UserCreate(BaseModel):
    Username: str
    Password: str
    Email: EmailStr
    Birthday: Optional[datetime] = None

    @field_validator("Username")
    @classmethod
    def check_username(cls, value: str) -> str:
        return validate_username(value)

    @field_validator("Password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return validate_password(value)

class UserUpdate(BaseModel):
    # 부분 업데이트: 요청 본문에 들어온 필드만 반영한다
    Username: Optional[str] = None
    Password: Optional[str] = None
    Email: Optional[EmailStr] = None
    Birthday: Optional[datetime] = None

    @field_validator("Username")
    @classmethod
    def check_username(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else validate_username(value)

    @field_validator("Password")
    @classmethod
    def check_password(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else validate_password(value)

class LoginRequest(BaseModel):
    Username: str
    Password: str

class UserPublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[PydanticObjectId] = Field(default=None, alias="_id")
    Username: str
    Password: str  # 해시값
    Email: str
    Birthday: Optional[datetime] = None
    FavoriteMovies: List[PydanticObjectId] = []

class LoginResponse(BaseModel):
    user: UserPublic
    token: str
