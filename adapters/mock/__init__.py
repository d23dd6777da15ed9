"""
Mock 어댑터

테스트용 Mock 구현체 제공.
httpx 전송 계층을 대체하여 실제 네트워크 없이 클라이언트 검증.
"""

from adapters.mock.transport import MockBitfinexTransport, MockResponse, RecordedRequest

__all__ = [
    "MockBitfinexTransport",
    "MockResponse",
    "RecordedRequest",
]
