# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import List
from pydantic import Field

# backend/myflix_api/core/config.py 기준으로 패키지, backend 디렉토리, 프로젝트 루트 계산
PACKAGE_ROOT = Path(__file__).parent.parent
BACKEND_ROOT = PACKAGE_ROOT.parent
PROJECT_ROOT = BACKEND_ROOT.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

DEFAULT_CORS_ALLOW_ORIGINS = ",".join([
    "http://localhost:8080",
    "http://localhost:4200",
    "http://testsite.com",
    "http://localhost:1234",
    "https://at-myflix-app.netlify.app",
    "https://andrew0t.github.io",
])

class Settings(BaseSettings):
    APP_NAME: str = "myflix"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # 배포 환경에서 쓰는 환경변수 이름 그대로 (CONNECTION_URI)
    CONNECTION_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "myFlixDB"

    JWT_SECRET_KEY: str = Field(..., description="JWT 토큰 서명에 사용되는 비밀키. 반드시 강력한 랜덤 문자열로 설정하세요.")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    CORS_ALLOW_ORIGINS: str = DEFAULT_CORS_ALLOW_ORIGINS

    # /documentation 에서 내려주는 정적 HTML 파일 (패키지 데이터로 함께 설치됨)
    DOCUMENTATION_PATH: Path = PACKAGE_ROOT / "public" / "documentation.html"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]

settings = Settings()
