"""
타입 정의 모듈

Enum, Dataclass 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP 메서드"""

    GET = "GET"
    POST = "POST"


class AuthScheme(str, Enum):
    """인증 방식

    auth_token이 있으면 TOKEN 우선, 없으면 API_KEY (key + secret 서명)
    """

    API_KEY = "API_KEY"
    TOKEN = "TOKEN"


class TransformKind(str, Enum):
    """응답 변환 방식"""

    NONE = "NONE"  # 변환 없음 (그대로 반환)
    RECORD = "RECORD"  # 행(row) -> 모델 클래스
    FUNCTION = "FUNCTION"  # 임의 함수 data -> result

