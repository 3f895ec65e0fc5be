# 커스텀 예외 클래스 정의
# - 서비스/저장소 레이어는 HTTP를 모르고 도메인 예외만 발생시킨다
# - main.py의 예외 핸들러가 status_code 속성을 보고 평문 응답으로 변환

class MyflixError(Exception):
    """myFlix 도메인 예외의 기본 클래스

    Attributes:
        status_code: 클라이언트에게 돌려줄 HTTP 상태 코드
        message: 응답 본문에 그대로 실리는 메시지
    """
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UsernameTakenError(MyflixError):
    """이미 존재하는 Username으로 생성/변경을 시도한 경우 (unique 인덱스 위반)"""
    status_code = 400

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"{username} already exists")


class UserNotFoundError(MyflixError):
    status_code = 400

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"{username} was not found.")


class MovieNotFoundError(MyflixError):
    """장르/감독 이름으로 찾은 영화가 하나도 없는 경우

    Attributes:
        field_name: 검색한 필드 (예: "Genre", "Director")
        value: 검색한 이름
    """
    status_code = 400

    def __init__(self, field_name: str, value: str):
        self.field_name = field_name
        self.value = value
        super().__init__(f"No movie found with {field_name} {value}")


class AuthenticationError(MyflixError):
    status_code = 401

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message)
