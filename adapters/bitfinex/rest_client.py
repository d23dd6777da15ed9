"""
Bitfinex v2 REST API 클라이언트

HMAC-SHA384 서명, 단조 증가 nonce, 에러 분류, 응답 변환.
IRestDispatcher Protocol 준수.

요청 파이프라인:
    요청 생성 (nonce + 서명) -> httpx 전송 -> 에러 분류 | JSON 파싱 -> 응답 변환
"""

import asyncio
import json
import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from adapters.bitfinex.auth import NonceFactory, NonceGenerator, omit_nil, serialize_body, sign_request
from adapters.bitfinex.currency import currency_conf_keys, gen_currency_list
from adapters.bitfinex.errors import classify_http_error, enrich_nonce_message
from adapters.bitfinex.transform import ResponseTransformer, Transformer
from adapters.interfaces import Callback
from adapters.models import (
    Alert,
    Candle,
    Currency,
    FundingTicker,
    Order,
    PublicTrade,
    TradingTicker,
    UserInfo,
    Wallet,
)
from core.config.loader import ClientConfig, build_client_config
from core.constants import BitfinexEndpoints, Headers
from core.errors import (
    ApiError,
    BitfinexError,
    InvalidArgumentError,
    InvalidResponseError,
    MissingCredentialsError,
    NetworkError,
    RequestTimeoutError,
)
from core.types import HttpMethod

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """NaN/Infinity는 JSON이 아님"""
    raise ValueError(f"invalid JSON constant: {name}")


class BitfinexRestClient:
    """Bitfinex v2 REST API 클라이언트

    IRestDispatcher Protocol 구현.
    설정은 생성 시 ClientConfig로 고정되며 이후 변경되지 않음.
    여러 요청을 동시에 호출해도 안전하지만, 인증 요청의 nonce 도착 순서는
    직렬화하지 않음 (동시 인증 요청 순서는 호출자 책임).

    Args:
        url: API 베이스 URL
        api_key: API 키
        api_secret: API 시크릿
        auth_token: 인증 토큰 (api_key/api_secret보다 우선)
        company: 통화 설정 키 접미사
        aff_code: 제휴 코드
        transform: 응답을 모델 인스턴스로 변환할지 여부
        timeout: 요청 타임아웃 (밀리초, 양의 정수)
        transport: httpx 전송 계층 (프록시/테스트용)
        nonce_factory: nonce 생성 함수 (엄격히 증가해야 함)

    Raises:
        InvalidArgumentError: timeout이 양의 정수가 아닌 경우 (생성 시 즉시)

    사용 예시:
    ```python
    async with BitfinexRestClient(api_key="xxx", api_secret="xxx", transform=True) as client:
        wallets = await client.wallets()
    ```
    """

    URL = BitfinexEndpoints.API_URL

    def __init__(
        self,
        url: str | None = None,
        api_key: str | None = None,
        api_secret: str | None = None,
        auth_token: str | None = None,
        company: str | None = None,
        aff_code: str | None = None,
        transform: bool = False,
        timeout: Any = None,
        transport: httpx.AsyncBaseTransport | None = None,
        nonce_factory: NonceFactory | None = None,
    ):
        self.config = build_client_config(
            url=url,
            api_key=api_key,
            api_secret=api_secret,
            auth_token=auth_token,
            company=company,
            aff_code=aff_code,
            transform=transform,
            timeout=timeout,
        )
        self._transport = transport
        self._nonce = nonce_factory or NonceGenerator()
        self._transformer = ResponseTransformer(self.config.transform)
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        nonce_factory: NonceFactory | None = None,
    ) -> "BitfinexRestClient":
        """ClientConfig로 생성"""
        return cls(
            url=config.url,
            api_key=config.api_key,
            api_secret=config.api_secret,
            auth_token=config.auth_token,
            company=config.company,
            aff_code=config.aff_code,
            transform=config.transform,
            timeout=config.timeout,
            transport=transport,
            nonce_factory=nonce_factory,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(transport=self._transport)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BitfinexRestClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def get_url(self) -> str:
        """API 베이스 URL"""
        return self.config.url

    def uses_agent(self) -> bool:
        """커스텀 전송 계층 사용 여부"""
        return self._transport is not None

    def _build_url(self, path: str) -> str:
        return f"{self.config.url}{BitfinexEndpoints.URL_VERSION_PREFIX}{path}"

    # -------------------------------------------------------------------------
    # 요청 파이프라인
    # -------------------------------------------------------------------------

    def _complete(self, err: Exception | None, result: Any, callback: Callback | None) -> Any:
        """요청 결과 전달

        callback이 있으면 (err, result)로 호출하고 그 반환값을 돌려줌.
        없으면 에러는 raise, 성공은 결과 반환.
        """
        if isinstance(err, ApiError):
            enrich_nonce_message(err)

        if callback is not None:
            return callback(err, None) if err is not None else callback(None, result)

        if err is not None:
            raise err
        return result

    @staticmethod
    def _check_callback(callback: Any) -> None:
        if callback is not None and not callable(callback):
            raise InvalidArgumentError("callback param must be a function")

    async def _request(
        self,
        method: HttpMethod,
        path: str,
        headers: dict[str, str] | None,
        content: str | None,
        transformer: Any,
        callback: Callback | None,
    ) -> Any:
        """API 요청 실행

        Args:
            method: HTTP 메서드
            path: API 경로 (예: /auth/r/wallets)
            headers: 요청 헤더
            content: 직렬화된 요청 본문
            transformer: 응답 변환기
            callback: 완료 콜백

        Returns:
            (변환된) JSON 응답 또는 callback 반환값

        Raises:
            RequestTimeoutError: 타임아웃
            NetworkError: 연결 실패
            ApiError: HTTP 비정상 응답
            InvalidResponseError: 정상 응답이 JSON이 아닌 경우
            TransformError: 응답 변환 실패
        """
        try:
            resolved = Transformer.resolve(transformer)
            data = await self._execute(method, path, headers, content)
            result = self._transformer.transform(data, resolved)
        except BitfinexError as e:
            return self._complete(e, None, callback)

        return self._complete(None, result, callback)

    async def _execute(
        self,
        method: HttpMethod,
        path: str,
        headers: dict[str, str] | None,
        content: str | None,
    ) -> Any:
        """HTTP 전송 + 응답 해석 (변환 전 JSON 반환)"""
        url = self._build_url(path)
        client = await self._get_client()

        logger.debug("%s %s", method.value, url)

        try:
            # httpx timeout은 단계별(connect/read/...) 제한이므로 전체 호출은 wait_for로 제한
            response = await asyncio.wait_for(
                client.request(
                    method.value,
                    url,
                    headers=headers,
                    content=content,
                    timeout=self.config.timeout_seconds,
                ),
                timeout=self.config.timeout_seconds,
            )
            # 본문은 항상 텍스트로 먼저 읽음 (JSON 가정 금지)
            raw = response.text
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning(
                "Request timeout",
                extra={"path": path, "timeout_ms": self.config.timeout},
            )
            raise RequestTimeoutError(url, self.config.timeout) from e
        except httpx.RequestError as e:
            logger.error(
                "Request error",
                extra={"path": path, "error": str(e)},
            )
            raise NetworkError(url, str(e)) from e

        if not response.is_success:
            error = classify_http_error(response.status_code, response.reason_phrase, raw)
            logger.warning(
                "Bitfinex API error",
                extra={"path": path, "status": error.status, "code": error.code},
            )
            raise error

        try:
            return json.loads(raw, parse_constant=_reject_constant)
        except ValueError as e:
            raise InvalidResponseError(f"invalid JSON response: {e}", raw) from e

    # -------------------------------------------------------------------------
    # 기본 요청 형태
    # -------------------------------------------------------------------------

    async def public_get(
        self,
        path: str,
        callback: Callback | None = None,
        transformer: Any = None,
    ) -> Any:
        """공개 GET 요청 (인증 헤더 없음)

        Raises:
            InvalidArgumentError: callback이 함수가 아닌 경우 (요청 전)
        """
        self._check_callback(callback)
        return await self._request(HttpMethod.GET, path, None, None, transformer, callback)

    async def public_post(
        self,
        path: str,
        body: dict[str, Any] | None = None,
        callback: Callback | None = None,
        transformer: Any = None,
    ) -> Any:
        """공개 POST 요청 (계산 엔드포인트 등, 인증 헤더 없음)"""
        self._check_callback(callback)
        headers = {Headers.CONTENT_TYPE: "application/json"}
        try:
            content = serialize_body(omit_nil(body or {}))
        except InvalidArgumentError as e:
            return self._complete(e, None, callback)
        return await self._request(HttpMethod.POST, path, headers, content, transformer, callback)

    async def auth_post(
        self,
        path: str,
        body: dict[str, Any] | None = None,
        callback: Callback | None = None,
        transformer: Any = None,
    ) -> Any:
        """인증 POST 요청

        api_key + api_secret 또는 auth_token 필요.
        본문의 None 값 필드는 서명/직렬화 전에 제거 (빈 문자열은 유지).

        Raises:
            MissingCredentialsError: 인증 정보 없음 (네트워크 호출 없음)
        """
        self._check_callback(callback)

        if not self.config.has_credentials:
            return self._complete(MissingCredentialsError(), None, callback)

        try:
            envelope = sign_request(
                path,
                body or {},
                nonce=self._nonce(),
                api_secret=self.config.api_secret,
                scheme=self.config.auth_scheme,
            )
        except InvalidArgumentError as e:
            return self._complete(e, None, callback)
        headers = envelope.headers(
            self.config.auth_scheme,
            api_key=self.config.api_key,
            auth_token=self.config.auth_token,
        )
        return await self._request(HttpMethod.POST, path, headers, envelope.body, transformer, callback)

    def transform(self, data: Any, transformer: Any) -> Any:
        """응답 변환 (transform 옵션이 꺼져 있으면 그대로 반환)"""
        return self._transformer.transform(data, Transformer.resolve(transformer))

    # -------------------------------------------------------------------------
    # 공개 시세/설정
    # -------------------------------------------------------------------------

    async def status(self, callback: Callback | None = None) -> Any:
        """플랫폼 상태 ([1] 운영 중, [0] 점검 중)"""
        return await self.public_get("/platform/status", callback)

    async def ticker(self, symbol: str, callback: Callback | None = None) -> Any:
        """단일 티커 조회

        t 접두사 심볼은 TradingTicker, f 접두사는 FundingTicker.
        """

        def to_ticker(data: list[Any]) -> Any:
            row = [symbol, *data]
            return TradingTicker(row) if symbol.startswith("t") else FundingTicker(row)

        return await self.public_get(f"/ticker/{symbol}", callback, Transformer.function(to_ticker))

    async def tickers(self, symbols: list[str] | None = None, callback: Callback | None = None) -> Any:
        """티커 목록 조회 (심볼 미지정 시 전체)"""

        def to_tickers(data: list[list[Any]]) -> list[Any]:
            return [
                TradingTicker(row) if str(row[0] or "").startswith("t") else FundingTicker(row)
                for row in data
            ]

        query = ",".join(symbols) if symbols else "ALL"
        return await self.public_get(f"/tickers?symbols={query}", callback, Transformer.function(to_tickers))

    async def candles(
        self,
        timeframe: str,
        symbol: str,
        section: str,
        query: dict[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> Any:
        """캔들 조회

        Args:
            timeframe: 시간 단위 (예: 1m, 1h, 1D)
            symbol: 거래 심볼 (예: tBTCUSD)
            section: "last" (최신 1개) 또는 "hist"
            query: start, end, limit, sort
        """
        path = f"/candles/trade:{timeframe}:{symbol}/{section}"
        if query:
            path += f"?{urlencode(query)}"
        return await self.public_get(path, callback, Transformer.record(Candle))

    async def trades(
        self,
        symbol: str,
        start: int | None = None,
        end: int | None = None,
        limit: int | None = None,
        sort: int | None = None,
        callback: Callback | None = None,
    ) -> Any:
        """공개 체결 내역 조회"""
        query = omit_nil({"start": start, "end": end, "limit": limit, "sort": sort})
        path = f"/trades/{symbol}/hist"
        if query:
            path += f"?{urlencode(query)}"
        return await self.public_get(path, callback, Transformer.record(PublicTrade))

    async def conf(self, keys: list[str] | None = None, callback: Callback | None = None) -> Any:
        """설정 조회 (키가 없으면 요청 없이 [] 반환)"""
        if not keys:
            return self._complete(None, [], callback)
        return await self.public_get(f"/conf/{','.join(keys)}", callback)

    async def symbols(self, callback: Callback | None = None) -> Any:
        """거래쌍 목록"""

        def first_list(data: list[Any]) -> Any:
            return data[0] if data else []

        return await self.public_get(
            "/conf/pub:list:pair:exchange",
            callback,
            Transformer.function(first_list),
        )

    async def currencies(self, callback: Callback | None = None) -> Any:
        """통화 목록 (이름, 풀, 익스플로러, 심볼, 지갑 FX 병합)"""

        def to_currencies(data: Any) -> Any:
            merged = gen_currency_list(data)
            return self._transformer.class_transform(merged, Currency)

        path = f"/conf/{','.join(currency_conf_keys(self.config.company))}"
        return await self.public_get(path, callback, Transformer.function(to_currencies))

    async def market_average_price(
        self,
        symbol: str,
        amount: Any,
        period: int | None = None,
        rate_limit: Any = None,
        callback: Callback | None = None,
    ) -> Any:
        """시장가 평균 체결가 계산 (공개 POST)"""
        query = omit_nil({"symbol": symbol, "amount": amount, "period": period, "rate_limit": rate_limit})
        return await self.public_post(f"/calc/trade/avg?{urlencode(query)}", {}, callback)

    # -------------------------------------------------------------------------
    # 계정 (인증)
    # -------------------------------------------------------------------------

    async def wallets(self, callback: Callback | None = None) -> Any:
        """지갑 잔고 목록"""
        return await self.auth_post("/auth/r/wallets", {}, callback, Transformer.record(Wallet))

    async def active_orders(self, ids: list[int] | None = None, callback: Callback | None = None) -> Any:
        """활성 주문 목록 (ids 지정 시 해당 주문만)"""
        return await self.auth_post("/auth/r/orders", {"id": ids}, callback, Transformer.record(Order))

    async def alert_list(self, alert_type: str = "price", callback: Callback | None = None) -> Any:
        """가격 알림 목록"""
        return await self.auth_post("/auth/r/alerts", {"type": alert_type}, callback, Transformer.record(Alert))

    async def user_info(self, callback: Callback | None = None) -> Any:
        """계정 정보"""
        return await self.auth_post("/auth/r/info/user", {}, callback, Transformer.record(UserInfo))
