"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
엔드포인트 래퍼는 이 Protocol의 기본 요청 함수만 사용.
"""

from typing import Any, Callable, Protocol, runtime_checkable


Callback = Callable[[Exception | None, Any], Any]


@runtime_checkable
class IRestDispatcher(Protocol):
    """REST 요청 디스패처 인터페이스

    엔드포인트 래퍼가 사용하는 기본 요청 형태:
    공개 GET, 공개 POST, 인증 POST, 응답 변환.
    """

    async def public_get(
        self,
        path: str,
        callback: Callback | None = None,
        transformer: Any = None,
    ) -> Any:
        """공개 GET 요청 (인증 헤더 없음)

        Args:
            path: API 경로 (예: /platform/status)
            callback: 완료 콜백 (err, result)
            transformer: 응답 변환기 (None, 모델 클래스, 함수)

        Returns:
            (변환된) 응답 데이터
        """
        ...

    async def public_post(
        self,
        path: str,
        body: dict[str, Any],
        callback: Callback | None = None,
        transformer: Any = None,
    ) -> Any:
        """공개 POST 요청 (JSON 본문, 인증 헤더 없음)"""
        ...

    async def auth_post(
        self,
        path: str,
        body: dict[str, Any] | None = None,
        callback: Callback | None = None,
        transformer: Any = None,
    ) -> Any:
        """인증 POST 요청 (nonce + 서명 또는 토큰)"""
        ...

    def transform(self, data: Any, transformer: Any) -> Any:
        """응답 변환"""
        ...
