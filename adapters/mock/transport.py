"""
Mock HTTP 전송 계층

테스트용 httpx 전송 계층. 요청을 기록하고 미리 지정한 응답을 순서대로 반환.
BitfinexRestClient(transport=...)에 그대로 주입 가능.
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass
class RecordedRequest:
    """기록된 요청"""

    method: str
    url: str
    headers: dict[str, str]
    body: str

    @property
    def path(self) -> str:
        """URL 경로 (쿼리 포함)"""
        parsed = httpx.URL(self.url)
        query = parsed.query.decode("ascii")
        return f"{parsed.path}?{query}" if query else parsed.path

    def json(self) -> Any:
        """본문 JSON 파싱"""
        return json.loads(self.body)


@dataclass
class MockResponse:
    """대기 중인 응답

    raise_exc가 있으면 응답 대신 해당 예외 발생 (타임아웃 등 시뮬레이션).
    delay는 응답 전 대기 시간 (초, 느린 서버 시뮬레이션).
    """

    status_code: int = 200
    body: str = "[]"
    raise_exc: Exception | None = None
    delay: float = 0.0


@dataclass
class MockState:
    """Mock 상태 (메모리 내 저장)"""

    requests: list[RecordedRequest] = field(default_factory=list)
    responses: list[MockResponse] = field(default_factory=list)
    default: MockResponse = field(default_factory=MockResponse)


class MockBitfinexTransport(httpx.AsyncBaseTransport):
    """Mock 전송 계층

    사용 예시:
    ```python
    transport = MockBitfinexTransport()
    transport.add_json([["USDT", "Tether"]])
    transport.add_error(400, ["error", 10010, "ERR_RATE_LIMIT"])

    client = BitfinexRestClient(transport=transport)
    ```
    """

    def __init__(self, state: MockState | None = None):
        self.state = state or MockState()

    # -------------------------------------------------------------------------
    # 응답 설정
    # -------------------------------------------------------------------------

    def add_json(self, data: Any, status_code: int = 200, delay: float = 0.0) -> None:
        """JSON 응답 추가 (delay초 후 응답)"""
        self.state.responses.append(
            MockResponse(status_code=status_code, body=json.dumps(data), delay=delay)
        )

    def add_text(self, body: str, status_code: int = 200) -> None:
        """원문 텍스트 응답 추가"""
        self.state.responses.append(MockResponse(status_code=status_code, body=body))

    def add_error(self, status_code: int, data: Any) -> None:
        """에러 응답 추가 (문자열이면 원문, 그 외 JSON)"""
        body = data if isinstance(data, str) else json.dumps(data)
        self.state.responses.append(MockResponse(status_code=status_code, body=body))

    def add_exception(self, exc: Exception) -> None:
        """전송 예외 추가 (httpx.ReadTimeout 등)"""
        self.state.responses.append(MockResponse(raise_exc=exc))

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    @property
    def requests(self) -> list[RecordedRequest]:
        return self.state.requests

    @property
    def call_count(self) -> int:
        return len(self.state.requests)

    @property
    def last_request(self) -> RecordedRequest | None:
        return self.state.requests[-1] if self.state.requests else None

    # -------------------------------------------------------------------------
    # httpx.AsyncBaseTransport
    # -------------------------------------------------------------------------

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        self.state.requests.append(
            RecordedRequest(
                method=request.method,
                url=str(request.url),
                headers={k.lower(): v for k, v in request.headers.items()},
                body=body.decode("utf-8"),
            )
        )

        pending = self.state.responses.pop(0) if self.state.responses else self.state.default
        if pending.delay:
            await asyncio.sleep(pending.delay)
        if pending.raise_exc is not None:
            raise pending.raise_exc

        return httpx.Response(
            status_code=pending.status_code,
            content=pending.body.encode("utf-8"),
            request=request,
        )
