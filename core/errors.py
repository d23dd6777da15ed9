"""
에러 정의 모듈

REST 요청 파이프라인에서 발생하는 모든 예외.
모든 예외는 BitfinexError를 상속하며 내부에서 재시도/무시하지 않고 호출자에게 전달.
"""

from typing import Any


class BitfinexError(Exception):
    """Bitfinex 클라이언트 기본 예외"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        # message는 nonce 안내 링크 등으로 보강될 수 있음
        return self.message


class MissingCredentialsError(BitfinexError):
    """인증 정보 누락

    api_key/api_secret 쌍과 auth_token이 모두 없을 때 발생.
    네트워크 호출 전에 발생.
    """

    def __init__(self, message: str = "missing api key or secret"):
        super().__init__(message)


class InvalidArgumentError(BitfinexError, ValueError):
    """잘못된 호출 인자

    예: 호출 불가능한 callback, 정수가 아닌 timeout
    """

    pass


class RequestTimeoutError(BitfinexError):
    """요청 타임아웃"""

    def __init__(self, url: str, timeout_ms: int):
        self.url = url
        self.timeout_ms = timeout_ms
        super().__init__(f"request timed out after {timeout_ms}ms: {url}")


class NetworkError(BitfinexError):
    """연결 수준 실패 (DNS, 연결 거부 등)"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"request failed: {url}: {message}")


class ApiError(BitfinexError):
    """HTTP 비정상 응답 에러

    Attributes:
        status: HTTP 상태 코드 (예: 400, 500)
        status_text: HTTP 상태 문구 (예: "Bad Request")
        code: Bitfinex 에러 코드 (본문이 [type, code, detail] 형태일 때만)
        response: 에러 상세 (detail, 파싱된 JSON, 또는 원문 텍스트)
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        status_text: str | None = None,
        code: Any = None,
        response: Any = None,
    ):
        self.status = status
        self.status_text = status_text
        self.code = code
        self.response = response
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (로깅용)"""
        return {
            "message": self.message,
            "status": self.status,
            "status_text": self.status_text,
            "code": self.code,
            "response": self.response,
        }


class InvalidResponseError(BitfinexError):
    """정상(2xx) 응답이 JSON이 아닐 때 발생"""

    def __init__(self, message: str, body: str):
        self.body = body
        super().__init__(message)


class TransformError(BitfinexError):
    """응답 변환 함수/모델에서 예외 발생"""

    pass
