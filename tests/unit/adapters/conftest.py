"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

from typing import Callable

import pytest

from adapters.bitfinex.rest_client import BitfinexRestClient
from adapters.mock.transport import MockBitfinexTransport


class CountingNonce:
    """테스트용 결정적 nonce (1, 2, 3, ...)"""

    def __init__(self, start: int = 1):
        self.value = start - 1

    def __call__(self) -> str:
        self.value += 1
        return str(self.value)


# -------------------------------------------------------------------------
# Mock 전송 계층 / 클라이언트 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def mock_transport() -> MockBitfinexTransport:
    """Mock 전송 계층"""
    return MockBitfinexTransport()


@pytest.fixture
def make_client(mock_transport: MockBitfinexTransport) -> Callable[..., BitfinexRestClient]:
    """Mock 전송 계층을 사용하는 클라이언트 팩토리"""

    def factory(**kwargs) -> BitfinexRestClient:
        kwargs.setdefault("url", "https://api.bitfinex.com")
        kwargs.setdefault("nonce_factory", CountingNonce())
        return BitfinexRestClient(transport=mock_transport, **kwargs)

    return factory


@pytest.fixture
def auth_client(make_client) -> BitfinexRestClient:
    """api_key/api_secret 인증 클라이언트"""
    return make_client(api_key="test_key", api_secret="secret")


# -------------------------------------------------------------------------
# Bitfinex API 응답 샘플
# -------------------------------------------------------------------------

@pytest.fixture
def currency_conf_response() -> list:
    """통화 설정 6개 배열 응답 샘플"""
    return [
        ["BTC", "ETH", "USDT"],
        [["BTC", "BTC"], ["ETH", "ETH"], ["USDT", "UST"]],
        [["BTC", "Bitcoin"], ["ETH", "Ethereum"], ["USDT", "Tether"]],
        [["ETH", "ETH"], ["USDT", "ETH"]],
        [["BTC", ["https://blockstream.info"]], ["ETH", ["https://etherscan.io"]]],
        [["BTC", ["BTCF0"]]],
    ]


@pytest.fixture
def wallet_rows() -> list:
    """지갑 잔고 응답 샘플"""
    return [
        ["exchange", "USD", 1000.5, 0, 900.25, None, None],
        ["margin", "BTC", 0.5, 0, 0.5, None, None],
    ]
